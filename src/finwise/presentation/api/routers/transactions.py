"""Income and expense records: listing, upcoming bills and CRUD."""

import logging
from datetime import date
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from finwise.application.commands import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
    UpdateTransactionCommand,
)
from finwise.application.queries import ListTransactionsQuery
from finwise.domain.ledger.value_objects import TransactionType
from finwise.presentation.api.dependencies import ApiSettings, RepoFactory
from finwise.presentation.api.schemas.transactions import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TypeFilter = Annotated[
    TransactionType | None,
    Query(description="Only income or only expense transactions"),
]
StartDateFilter = Annotated[
    date | None,
    Query(alias="startDate", description="Start of period (inclusive)"),
]
EndDateFilter = Annotated[
    date | None,
    Query(alias="endDate", description="End of period (inclusive)"),
]
UpcomingFilter = Annotated[
    int | None,
    Query(ge=0, le=365, description="Pending bills due within this many days"),
]


@router.get(
    "",
    summary="List transactions",
    responses={
        200: {"description": "Transactions, newest first (upcoming: by due date)"},
        400: {"description": "Invalid period"},
    },
)
async def list_transactions(
    factory: RepoFactory,
    type: TypeFilter = None,  # NOQA: A002
    start_date: StartDateFilter = None,
    end_date: EndDateFilter = None,
    upcoming: UpcomingFilter = None,
) -> list[TransactionResponse]:
    """
    List transactions.

    Filters combine. `upcoming=N` returns pending transactions whose due
    date falls between today and N days from today, soonest first.
    """
    query = ListTransactionsQuery.from_factory(factory)
    transactions = await query.execute(
        transaction_type=type,
        start_date=start_date,
        end_date=end_date,
        upcoming_days=upcoming,
    )
    return [TransactionResponse.from_record(t) for t in transactions]


@router.get(
    "/upcoming",
    summary="List upcoming bills",
    responses={200: {"description": "Pending transactions due soon"}},
)
async def list_upcoming_bills(
    factory: RepoFactory,
    settings: ApiSettings,
    days: UpcomingFilter = None,
) -> list[TransactionResponse]:
    """Pending transactions due within `days` (default from settings)."""
    query = ListTransactionsQuery.from_factory(factory)
    transactions = await query.execute(
        upcoming_days=settings.upcoming_bills_days if days is None else days,
    )
    return [TransactionResponse.from_record(t) for t in transactions]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a transaction",
    responses={
        201: {"description": "Transaction recorded"},
        400: {"description": "Invalid amount, date or status"},
        404: {"description": "Category not found"},
        422: {"description": "Category type does not match transaction type"},
    },
)
async def create_transaction(
    request: TransactionCreateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    """Record an income or expense under a category of the same type."""
    command = CreateTransactionCommand.from_factory(factory)

    try:
        txn = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return TransactionResponse.from_record(txn)


@router.put(
    "/{transaction_id}",
    summary="Update a transaction",
    responses={
        200: {"description": "Transaction updated"},
        404: {"description": "Transaction or category not found"},
    },
)
async def update_transaction(
    transaction_id: UUID,
    request: TransactionUpdateRequest,
    factory: RepoFactory,
) -> TransactionResponse:
    """Change the fields that are present in the body."""
    command = UpdateTransactionCommand.from_factory(factory)

    try:
        txn = await command.execute(
            transaction_id=transaction_id,
            changes=request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return TransactionResponse.from_record(txn)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
    responses={
        204: {"description": "Transaction deleted"},
        404: {"description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: UUID,
    factory: RepoFactory,
) -> None:
    """Delete a transaction permanently."""
    command = DeleteTransactionCommand.from_factory(factory)

    try:
        await command.execute(transaction_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
