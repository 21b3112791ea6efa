"""SQLAlchemy implementation of CategoryRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finwise.domain.ledger.entities import CategoryRecord
from finwise.domain.ledger.repositories import CategoryRepository
from finwise.domain.ledger.value_objects import TransactionType
from finwise.infrastructure.persistence.sqlalchemy.models import CategoryModel

logger = logging.getLogger(__name__)


class CategoryRepositorySQLAlchemy(CategoryRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, category: CategoryRecord) -> None:
        model = await self._session.get(CategoryModel, category.id)
        if model is None:
            logger.debug("Creating new category: %s", category.name)
            model = CategoryModel(id=category.id)
            self._session.add(model)
        else:
            logger.debug("Updating existing category: %s", category.name)

        model.name = category.name
        model.type = category.type.value
        model.color = category.color
        model.icon = category.icon
        await self._session.flush()

    async def find_by_id(self, category_id: UUID) -> Optional[CategoryRecord]:
        model = await self._session.get(CategoryModel, category_id)
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[CategoryRecord]:
        stmt = select(CategoryModel).order_by(CategoryModel.name)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def find_by_type(
        self,
        category_type: TransactionType,
    ) -> list[CategoryRecord]:
        stmt = (
            select(CategoryModel)
            .where(CategoryModel.type == TransactionType(category_type).value)
            .order_by(CategoryModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete(self, category_id: UUID) -> bool:
        model = await self._session.get(CategoryModel, category_id)
        if not model:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    def _map_to_domain(self, model: CategoryModel) -> CategoryRecord:
        return CategoryRecord(
            id=model.id,
            name=model.name,
            type=model.type,
            color=model.color,
            icon=model.icon,
        )
