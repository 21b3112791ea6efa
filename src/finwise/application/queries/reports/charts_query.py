"""Chart data for the reports page."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional

from finwise.application.queries.period import resolve_period
from finwise.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)
from finwise.domain.reporting.services import AggregationService
from finwise.domain.reporting.value_objects import AggregationResult

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_MONTHS = 12


class ChartsQuery:
    """Expenses-by-category pie plus the rolling monthly balance series."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ChartsQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(  # NOQA: PLR0913
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        window_months: int = DEFAULT_WINDOW_MONTHS,
        as_of: Optional[date] = None,
    ) -> AggregationResult:
        period = resolve_period(start_date, end_date, year, month)

        transactions = await self._transaction_repo.find_all()
        categories = await self._category_repo.find_all()

        if period is None:
            in_period = transactions
        else:
            in_period = [t for t in transactions if period.contains(t.date)]

        logger.debug(
            "Building charts: %d transactions, %d in period %s",
            len(transactions),
            len(in_period),
            period,
        )
        return AggregationService.build_chart_data(
            all_transactions=transactions,
            range_transactions=in_period,
            categories=categories,
            window_months=window_months,
            as_of=as_of,
        )
