"""SQLAlchemy implementation of GoalRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finwise.domain.ledger.entities import GoalRecord
from finwise.domain.ledger.repositories import GoalRepository
from finwise.infrastructure.persistence.sqlalchemy.models import GoalModel

logger = logging.getLogger(__name__)


class GoalRepositorySQLAlchemy(GoalRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, goal: GoalRecord) -> None:
        model = await self._session.get(GoalModel, goal.id)
        if model is None:
            logger.debug("Creating new goal: %s", goal.name)
            model = GoalModel(id=goal.id)
            self._session.add(model)

        model.name = goal.name
        model.target_amount = goal.target_amount
        model.current_amount = goal.current_amount
        model.target_date = goal.target_date
        model.description = goal.description
        await self._session.flush()

    async def find_by_id(self, goal_id: UUID) -> Optional[GoalRecord]:
        model = await self._session.get(GoalModel, goal_id)
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[GoalRecord]:
        stmt = select(GoalModel).order_by(GoalModel.created_at)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete(self, goal_id: UUID) -> bool:
        model = await self._session.get(GoalModel, goal_id)
        if not model:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    def _map_to_domain(self, model: GoalModel) -> GoalRecord:
        return GoalRecord(
            id=model.id,
            name=model.name,
            target_amount=model.target_amount,
            current_amount=model.current_amount,
            target_date=model.target_date,
            description=model.description,
        )
