"""SQLAlchemy implementation of InvestmentRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finwise.domain.ledger.entities import InvestmentRecord
from finwise.domain.ledger.repositories import InvestmentRepository
from finwise.infrastructure.persistence.sqlalchemy.models import InvestmentModel

logger = logging.getLogger(__name__)


class InvestmentRepositorySQLAlchemy(InvestmentRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, investment: InvestmentRecord) -> None:
        model = await self._session.get(InvestmentModel, investment.id)
        if model is None:
            logger.debug("Creating new investment: %s", investment.name)
            model = InvestmentModel(id=investment.id)
            self._session.add(model)

        model.name = investment.name
        model.type = investment.type.value
        model.amount = investment.amount
        model.interest_rate = investment.interest_rate
        model.start_date = investment.start_date
        model.maturity_date = investment.maturity_date
        await self._session.flush()

    async def find_by_id(self, investment_id: UUID) -> Optional[InvestmentRecord]:
        model = await self._session.get(InvestmentModel, investment_id)
        return self._map_to_domain(model) if model else None

    async def find_all(self) -> list[InvestmentRecord]:
        stmt = select(InvestmentModel).order_by(InvestmentModel.start_date.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete(self, investment_id: UUID) -> bool:
        model = await self._session.get(InvestmentModel, investment_id)
        if not model:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    def _map_to_domain(self, model: InvestmentModel) -> InvestmentRecord:
        return InvestmentRecord(
            id=model.id,
            name=model.name,
            type=model.type,
            amount=model.amount,
            interest_rate=model.interest_rate,
            start_date=model.start_date,
            maturity_date=model.maturity_date,
        )
