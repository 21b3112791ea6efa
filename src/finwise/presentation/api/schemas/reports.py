"""Report schemas for chart endpoints."""

from decimal import Decimal

from pydantic import ConfigDict, Field

from finwise.presentation.api.schemas.common import CamelModel


class CategoryTotalResponse(CamelModel):
    """One slice of a category pie chart."""

    name: str = Field(..., description="Category name")
    value: Decimal = Field(..., description="Total amount for the category")
    color: str = Field(..., description="Hex color used for the slice")


class MonthlyBalanceResponse(CamelModel):
    """Income, expenses and running balance for one month."""

    month: str = Field(..., description="Month key (YYYY-MM)")
    label: str = Field(..., description="Display label, e.g. 'Jan 2025'")
    income: Decimal = Field(..., description="Received income in the month")
    expenses: Decimal = Field(..., description="Paid expenses in the month")
    balance: Decimal = Field(..., description="Running balance within the window")


class ChartsResponse(CamelModel):
    """Chart data for the reports page."""

    expenses_by_category: list[CategoryTotalResponse] = Field(
        ...,
        description="Paid expenses per expense category (zero totals omitted)",
    )
    balance_evolution: list[MonthlyBalanceResponse] = Field(
        ...,
        description="Rolling monthly series, oldest month first",
    )
    has_data: bool = Field(..., description="False when no transactions exist")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "expensesByCategory": [
                    {"name": "Rent", "value": "1500.00", "color": "#ef4444"},
                ],
                "balanceEvolution": [
                    {
                        "month": "2025-01",
                        "label": "Jan 2025",
                        "income": "5000.00",
                        "expenses": "1500.00",
                        "balance": "3500.00",
                    },
                ],
                "hasData": True,
            },
        },
    )


class TopIncomeResponse(CamelModel):
    """Income categories ranked by received income."""

    items: list[CategoryTotalResponse] = Field(..., description="Largest first")
    has_data: bool = Field(..., description="True when at least one item exists")
