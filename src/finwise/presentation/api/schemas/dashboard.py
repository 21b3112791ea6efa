"""Dashboard schemas for API request/response models."""

from decimal import Decimal

from pydantic import ConfigDict, Field

from finwise.presentation.api.schemas.common import CamelModel


class DashboardSummaryResponse(CamelModel):
    """Financial KPIs for the dashboard.

    Income and expenses only count settled transactions; unsettled ones
    are reported as pending. The balance always covers the full history.
    """

    current_balance: Decimal = Field(..., description="All-time realized balance")
    monthly_income: Decimal = Field(..., description="Received income in period")
    monthly_expenses: Decimal = Field(..., description="Paid expenses in period")
    pending_income: Decimal = Field(..., description="Income not yet received")
    pending_expenses: Decimal = Field(
        ...,
        description="Pending and overdue expenses in period",
    )
    goals_progress: Decimal = Field(
        ...,
        description="Saved over targeted across all goals, in percent (may exceed 100)",
    )
    total_investments: Decimal = Field(..., description="Sum of invested amounts")
    goals_count: int = Field(..., description="Number of goals")
    transactions_count: int = Field(..., description="Number of transactions")
    has_transactions: bool = Field(..., description="False for an empty ledger")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "currentBalance": "3500.00",
                "monthlyIncome": "5000.00",
                "monthlyExpenses": "1500.00",
                "pendingIncome": "0.00",
                "pendingExpenses": "200.00",
                "goalsProgress": "42.50",
                "totalInvestments": "10000.00",
                "goalsCount": 2,
                "transactionsCount": 12,
                "hasTransactions": True,
            },
        },
    )
