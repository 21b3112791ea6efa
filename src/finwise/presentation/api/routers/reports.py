"""Reports router for chart data endpoints."""

import logging
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query

from finwise.application.queries import ChartsQuery, TopIncomeByCategoryQuery
from finwise.presentation.api.dependencies import ApiSettings, RepoFactory
from finwise.presentation.api.schemas.reports import (
    CategoryTotalResponse,
    ChartsResponse,
    MonthlyBalanceResponse,
    TopIncomeResponse,
)

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
YearFilter = Annotated[
    int | None,
    Query(ge=1900, le=9999, description="Calendar year (ignored with dates)"),
]
MonthFilter = Annotated[
    int | None,
    Query(ge=1, le=12, description="Month 1-12, requires year"),
]
WindowFilter = Annotated[
    int | None,
    Query(ge=1, le=60, description="Months in the balance series"),
]
LimitFilter = Annotated[
    int | None,
    Query(ge=1, le=100, description="Max categories to return"),
]


@router.get(
    "/charts",
    summary="Get chart data",
    responses={
        200: {"description": "Expenses by category and monthly balance series"},
        400: {"description": "Invalid period parameters"},
    },
)
async def get_charts(  # NOQA: PLR0913
    factory: RepoFactory,
    settings: ApiSettings,
    start_date: StartDateFilter = None,
    end_date: EndDateFilter = None,
    year: YearFilter = None,
    month: MonthFilter = None,
    months: WindowFilter = None,
) -> ChartsResponse:
    """
    Get the data behind the reports charts.

    - `expensesByCategory` covers paid expenses in the requested period
      (`startDate`/`endDate`, or `year` with optional `month`; all time if
      neither is given).
    - `balanceEvolution` always covers the last `months` calendar months
      up to the current month.
    """
    query = ChartsQuery.from_factory(factory)
    result = await query.execute(
        start_date=start_date,
        end_date=end_date,
        year=year,
        month=month,
        window_months=months or settings.report_window_months,
    )

    return ChartsResponse(
        expenses_by_category=[
            CategoryTotalResponse(name=c.name, value=c.value, color=c.color)
            for c in result.expenses_by_category
        ],
        balance_evolution=[
            MonthlyBalanceResponse(
                month=p.month,
                label=p.label,
                income=p.income,
                expenses=p.expenses,
                balance=p.balance,
            )
            for p in result.balance_evolution
        ],
        has_data=result.has_data,
    )


@router.get(
    "/top-income-by-category",
    summary="Get top income categories",
    responses={
        200: {"description": "Income categories ranked by received income"},
    },
)
async def get_top_income_by_category(
    factory: RepoFactory,
    limit: LimitFilter = None,
) -> TopIncomeResponse:
    """Rank income categories by received income, largest first."""
    query = TopIncomeByCategoryQuery.from_factory(factory)
    result = await query.execute(limit=limit)

    return TopIncomeResponse(
        items=[
            CategoryTotalResponse(name=c.name, value=c.value, color=c.color)
            for c in result.items
        ],
        has_data=result.has_data,
    )
