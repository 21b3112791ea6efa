"""SQLAlchemy implementation of TransactionRepository."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from finwise.domain.ledger.entities import TransactionRecord
from finwise.domain.ledger.repositories import TransactionRepository
from finwise.domain.ledger.value_objects import TransactionType
from finwise.infrastructure.persistence.sqlalchemy.models import TransactionModel

logger = logging.getLogger(__name__)


class TransactionRepositorySQLAlchemy(TransactionRepository):
    """SQLAlchemy implementation of the transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, transaction: TransactionRecord) -> None:
        model = await self._session.get(TransactionModel, transaction.id)

        if model:
            logger.debug("Updating existing transaction: %s", transaction.id)
            self._update_model_from_domain(model, transaction)
        else:
            logger.debug("Creating new transaction: %s", transaction.id)
            model = TransactionModel(id=transaction.id)
            self._update_model_from_domain(model, transaction)
            self._session.add(model)

        await self._session.flush()

    async def find_by_id(self, transaction_id: UUID) -> Optional[TransactionRecord]:
        model = await self._session.get(TransactionModel, transaction_id)
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[TransactionRecord]:
        stmt = select(TransactionModel).order_by(
            TransactionModel.date.desc(),
            TransactionModel.created_at.desc(),
        )
        return await self._fetch(stmt)

    async def find_by_date_range(
        self,
        start: date,
        end: date,
    ) -> list[TransactionRecord]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.date >= start, TransactionModel.date <= end)
            .order_by(TransactionModel.date.desc())
        )
        return await self._fetch(stmt)

    async def find_by_type(
        self,
        transaction_type: TransactionType,
    ) -> list[TransactionRecord]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.type == TransactionType(transaction_type).value)
            .order_by(TransactionModel.date.desc())
        )
        return await self._fetch(stmt)

    async def count_by_category(self, category_id: UUID) -> int:
        stmt = select(func.count(TransactionModel.id)).where(
            TransactionModel.category_id == category_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def delete(self, transaction_id: UUID) -> bool:
        model = await self._session.get(TransactionModel, transaction_id)
        if not model:
            return False
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted transaction: %s", transaction_id)
        return True

    async def _fetch(self, stmt) -> list[TransactionRecord]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    def _update_model_from_domain(
        self,
        model: TransactionModel,
        transaction: TransactionRecord,
    ) -> None:
        model.description = transaction.description
        model.amount = transaction.amount
        model.date = transaction.date
        model.type = transaction.type.value
        model.category_id = transaction.category_id
        model.status = transaction.status.value
        model.is_recurring = transaction.is_recurring
        model.due_date = transaction.due_date
        model.expense_type = (
            transaction.expense_type.value if transaction.expense_type else None
        )

    def _map_to_domain(self, model: TransactionModel) -> TransactionRecord:
        return TransactionRecord(
            id=model.id,
            description=model.description,
            amount=model.amount,
            date=model.date,
            type=model.type,
            category_id=model.category_id,
            status=model.status,
            is_recurring=model.is_recurring,
            due_date=model.due_date,
            expense_type=model.expense_type,
        )
