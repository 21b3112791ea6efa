"""Dashboard summary query - KPIs for the dashboard header cards."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from finwise.application.queries.period import resolve_period
from finwise.domain.ledger.repositories import (
    GoalRepository,
    InvestmentRepository,
    TransactionRepository,
)
from finwise.domain.reporting.services import SummaryService
from finwise.domain.reporting.value_objects import DashboardSummary

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


class DashboardSummaryQuery:
    """Query to generate dashboard summary data.

    Without a period the income and expense figures cover the whole
    history. The balance is always all-time.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        goal_repository: GoalRepository,
        investment_repository: InvestmentRepository,
    ):
        self._transaction_repo = transaction_repository
        self._goal_repo = goal_repository
        self._investment_repo = investment_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DashboardSummaryQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            goal_repository=factory.goal_repository(),
            investment_repository=factory.investment_repository(),
        )

    async def execute(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> DashboardSummary:
        period = resolve_period(start_date, end_date)
        transactions = await self._transaction_repo.find_all()
        goals = await self._goal_repo.find_all()
        investments = await self._investment_repo.find_all()
        return SummaryService.compute_summary(
            transactions,
            goals,
            investments,
            date_filter=period,
        )
