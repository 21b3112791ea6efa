"""Report queries - chart and ranking data."""

from finwise.application.queries.reports.charts_query import ChartsQuery
from finwise.application.queries.reports.top_income_query import (
    TopIncomeByCategoryQuery,
    TopIncomeResult,
)

__all__ = [
    "ChartsQuery",
    "TopIncomeByCategoryQuery",
    "TopIncomeResult",
]
