"""Create, edit and delete investments."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from finwise.domain.ledger.entities import InvestmentRecord
from finwise.domain.ledger.exceptions import InvestmentNotFoundError
from finwise.domain.ledger.repositories import InvestmentRepository

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateInvestmentCommand:
    def __init__(self, investment_repository: InvestmentRepository):
        self._investment_repo = investment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateInvestmentCommand:
        return cls(investment_repository=factory.investment_repository())

    async def execute(self, **fields: Any) -> InvestmentRecord:
        investment = InvestmentRecord(**fields)
        await self._investment_repo.save(investment)
        logger.info(
            "Created %s investment '%s' (%s)",
            investment.type.value,
            investment.name,
            investment.amount,
        )
        return investment


class UpdateInvestmentCommand:
    def __init__(self, investment_repository: InvestmentRepository):
        self._investment_repo = investment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateInvestmentCommand:
        return cls(investment_repository=factory.investment_repository())

    async def execute(
        self,
        investment_id: UUID,
        changes: dict[str, Any],
    ) -> InvestmentRecord:
        existing = await self._investment_repo.find_by_id(investment_id)
        if not existing:
            raise InvestmentNotFoundError(investment_id)

        updated = existing.with_changes(**changes)
        await self._investment_repo.save(updated)
        logger.info("Updated investment %s: %s", investment_id, sorted(changes))
        return updated


class DeleteInvestmentCommand:
    def __init__(self, investment_repository: InvestmentRepository):
        self._investment_repo = investment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteInvestmentCommand:
        return cls(investment_repository=factory.investment_repository())

    async def execute(self, investment_id: UUID) -> None:
        if not await self._investment_repo.delete(investment_id):
            raise InvestmentNotFoundError(investment_id)
        logger.info("Deleted investment %s", investment_id)
