from finwise.domain.reporting.value_objects.results import (
    AggregationResult,
    CategoryTotal,
    DashboardSummary,
    GoalProgress,
    MonthlyBalancePoint,
)

__all__ = [
    "AggregationResult",
    "CategoryTotal",
    "DashboardSummary",
    "GoalProgress",
    "MonthlyBalancePoint",
]
