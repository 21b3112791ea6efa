"""Dashboard router for financial summary endpoints."""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from finwise.application.queries import DashboardSummaryQuery
from finwise.presentation.api.dependencies import RepoFactory
from finwise.presentation.api.schemas.dashboard import DashboardSummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter()

StartDateFilter = Annotated[
    date | None,
    Query(alias="startDate", description="Start of period (inclusive)"),
]
EndDateFilter = Annotated[
    date | None,
    Query(alias="endDate", description="End of period (inclusive)"),
]


@router.get(
    "/summary",
    summary="Get dashboard summary",
    responses={
        200: {"description": "Financial dashboard summary"},
        400: {"description": "Invalid period"},
    },
)
async def get_dashboard_summary(
    factory: RepoFactory,
    start_date: StartDateFilter = None,
    end_date: EndDateFilter = None,
) -> DashboardSummaryResponse:
    """
    Get the dashboard KPIs.

    Income and expense totals cover `startDate`..`endDate` (both inclusive)
    or the whole history when no period is given. The balance is always
    computed over all transactions.
    """
    query = DashboardSummaryQuery.from_factory(factory)
    summary = await query.execute(start_date=start_date, end_date=end_date)

    return DashboardSummaryResponse(
        current_balance=summary.current_balance,
        monthly_income=summary.monthly_income,
        monthly_expenses=summary.monthly_expenses,
        pending_income=summary.pending_income,
        pending_expenses=summary.pending_expenses,
        goals_progress=summary.goals_progress,
        total_investments=summary.total_investments,
        goals_count=summary.goals_count,
        transactions_count=summary.transactions_count,
        has_transactions=summary.has_transactions,
    )
