"""Top income categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from finwise.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)
from finwise.domain.ledger.value_objects import TransactionType
from finwise.domain.reporting.services import AggregationService
from finwise.domain.reporting.value_objects import CategoryTotal

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


@dataclass
class TopIncomeResult:
    """Received income per category, largest first."""

    items: list[CategoryTotal] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return len(self.items) > 0


class TopIncomeByCategoryQuery:
    """Rank income categories by received income."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TopIncomeByCategoryQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(self, limit: Optional[int] = None) -> TopIncomeResult:
        transactions = await self._transaction_repo.find_by_type(
            TransactionType.INCOME,
        )
        categories = await self._category_repo.find_by_type(TransactionType.INCOME)
        items = AggregationService.aggregate_income_by_category(
            transactions,
            categories,
            limit=limit,
        )
        return TopIncomeResult(items=items)
