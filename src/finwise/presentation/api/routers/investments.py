"""Investments router: portfolio records and growth simulations."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from finwise.application.commands import (
    CreateInvestmentCommand,
    DeleteInvestmentCommand,
    UpdateInvestmentCommand,
)
from finwise.application.queries import (
    AccumulationQuery,
    ListInvestmentsQuery,
    SimulateInvestmentQuery,
)
from finwise.presentation.api.dependencies import RepoFactory
from finwise.presentation.api.schemas.investments import (
    AccumulationRequest,
    AccumulationResponse,
    InvestmentCreateRequest,
    InvestmentResponse,
    InvestmentUpdateRequest,
    SimulationRequest,
    SimulationYearResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/simulate",
    summary="Simulate compound growth",
    responses={
        200: {"description": "One entry per simulated year"},
        400: {"description": "Malformed (PARSE_ERROR) or invalid (INVALID_PARAMETER)"},
    },
)
async def simulate_investment(
    request: SimulationRequest,
) -> list[SimulationYearResponse]:
    """
    Project an investment year by year.

    Each year adds twelve monthly contributions and then applies the annual
    rate to the whole balance.

    **Example:** 1000 at 10% for 2 years gives `1100.00` and `1210.00`.
    """
    query = SimulateInvestmentQuery()
    results = await query.execute(
        amount=request.amount,
        interest_rate=request.interest_rate,
        years=request.years,
        monthly_contribution=request.monthly_contribution,
    )
    return [SimulationYearResponse.from_result(r) for r in results]


@router.post(
    "/simulate/accumulation",
    summary="Project a monthly savings plan",
    responses={
        200: {"description": "Monthly nominal and inflation-adjusted balances"},
        400: {"description": "Malformed or invalid input"},
    },
)
async def simulate_accumulation(
    request: AccumulationRequest,
) -> AccumulationResponse:
    """Compound monthly with deposits at the end of each month."""
    query = AccumulationQuery()
    projection = await query.execute(
        initial_amount=request.initial_amount,
        monthly_contribution=request.monthly_contribution,
        interest_rate=request.interest_rate,
        years=request.years,
        inflation_rate=request.inflation_rate,
    )
    return AccumulationResponse.from_projection(projection)


@router.get("", summary="List investments")
async def list_investments(factory: RepoFactory) -> list[InvestmentResponse]:
    query = ListInvestmentsQuery.from_factory(factory)
    investments = await query.execute()
    return [InvestmentResponse.from_record(i) for i in investments]


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an investment")
async def create_investment(
    request: InvestmentCreateRequest,
    factory: RepoFactory,
) -> InvestmentResponse:
    command = CreateInvestmentCommand.from_factory(factory)

    try:
        investment = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return InvestmentResponse.from_record(investment)


@router.put(
    "/{investment_id}",
    summary="Update an investment",
    responses={404: {"description": "Investment not found"}},
)
async def update_investment(
    investment_id: UUID,
    request: InvestmentUpdateRequest,
    factory: RepoFactory,
) -> InvestmentResponse:
    command = UpdateInvestmentCommand.from_factory(factory)

    try:
        investment = await command.execute(
            investment_id=investment_id,
            changes=request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return InvestmentResponse.from_record(investment)


@router.delete(
    "/{investment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an investment",
    responses={404: {"description": "Investment not found"}},
)
async def delete_investment(investment_id: UUID, factory: RepoFactory) -> None:
    command = DeleteInvestmentCommand.from_factory(factory)

    try:
        await command.execute(investment_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
