"""Application queries - read-only use cases."""

from finwise.application.queries.dashboard_summary_query import (
    DashboardSummaryQuery,
)
from finwise.application.queries.investing import (
    AccumulationQuery,
    SimulateInvestmentQuery,
)
from finwise.application.queries.ledger import (
    GoalWithProgress,
    ListAlertsQuery,
    ListCategoriesQuery,
    ListGoalsQuery,
    ListInvestmentsQuery,
    ListTransactionsQuery,
)
from finwise.application.queries.period import resolve_period
from finwise.application.queries.reports import (
    ChartsQuery,
    TopIncomeByCategoryQuery,
    TopIncomeResult,
)

__all__ = [
    "AccumulationQuery",
    "ChartsQuery",
    "DashboardSummaryQuery",
    "GoalWithProgress",
    "ListAlertsQuery",
    "ListCategoriesQuery",
    "ListGoalsQuery",
    "ListInvestmentsQuery",
    "ListTransactionsQuery",
    "SimulateInvestmentQuery",
    "TopIncomeByCategoryQuery",
    "TopIncomeResult",
    "resolve_period",
]
