"""Ledger queries - read access to stored records."""

from finwise.application.queries.ledger.list_alerts_query import ListAlertsQuery
from finwise.application.queries.ledger.list_categories_query import (
    ListCategoriesQuery,
)
from finwise.application.queries.ledger.list_goals_query import (
    GoalWithProgress,
    ListGoalsQuery,
)
from finwise.application.queries.ledger.list_investments_query import (
    ListInvestmentsQuery,
)
from finwise.application.queries.ledger.list_transactions_query import (
    ListTransactionsQuery,
)

__all__ = [
    "GoalWithProgress",
    "ListAlertsQuery",
    "ListCategoriesQuery",
    "ListGoalsQuery",
    "ListInvestmentsQuery",
    "ListTransactionsQuery",
]
