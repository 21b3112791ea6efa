"""List investments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from finwise.domain.ledger.entities import InvestmentRecord
from finwise.domain.ledger.repositories import InvestmentRepository

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


class ListInvestmentsQuery:
    def __init__(self, investment_repository: InvestmentRepository):
        self._investment_repo = investment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListInvestmentsQuery:
        return cls(investment_repository=factory.investment_repository())

    async def execute(self) -> list[InvestmentRecord]:
        return await self._investment_repo.find_all()
