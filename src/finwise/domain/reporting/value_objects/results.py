"""Derived report values.

These are recomputed on every call and have no lifecycle of their own.
"""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """One slice of a category pie chart."""

    name: str
    value: Decimal
    color: str


@dataclass(frozen=True)
class MonthlyBalancePoint:
    """Income, expenses and running balance for one calendar month."""

    month: str  # "YYYY-MM"
    label: str  # "Jan 2025"
    income: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class AggregationResult:
    """Chart data for the reports page."""

    expenses_by_category: list[CategoryTotal] = field(default_factory=list)
    balance_evolution: list[MonthlyBalancePoint] = field(default_factory=list)
    has_data: bool = False


@dataclass(frozen=True)
class GoalProgress:
    """A goal together with its clamped completion percentage."""

    goal_id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    progress: Decimal  # 0-100


@dataclass(frozen=True)
class DashboardSummary:
    """Flat KPI record for the dashboard.

    ``monthly_income``/``monthly_expenses`` only count realized
    transactions inside the requested period; ``current_balance`` is
    always all-time.
    """

    current_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    pending_income: Decimal
    pending_expenses: Decimal
    goals_progress: Decimal
    total_investments: Decimal
    goals_count: int
    transactions_count: int
    has_transactions: bool
