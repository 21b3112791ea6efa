"""List transactions with optional filters."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Optional

from finwise.application.queries.period import resolve_period
from finwise.domain.ledger.entities import TransactionRecord
from finwise.domain.ledger.repositories import TransactionRepository
from finwise.domain.ledger.value_objects import TransactionType
from finwise.domain.reporting.services import BillsService

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


class ListTransactionsQuery:
    """List transactions by type, inclusive date range or upcoming due date."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListTransactionsQuery:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(
        self,
        transaction_type: Optional[TransactionType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        upcoming_days: Optional[int] = None,
        today: Optional[date] = None,
    ) -> list[TransactionRecord]:
        """Filters combine; ``upcoming_days`` narrows to pending bills due soon."""
        period = resolve_period(start_date, end_date)

        if period is not None:
            transactions = await self._transaction_repo.find_by_date_range(
                period.start,
                period.end,
            )
        elif transaction_type is not None:
            transactions = await self._transaction_repo.find_by_type(
                TransactionType(transaction_type),
            )
        else:
            transactions = await self._transaction_repo.find_all()

        if transaction_type is not None:
            wanted = TransactionType(transaction_type)
            transactions = [t for t in transactions if t.type == wanted]

        if upcoming_days is not None:
            return BillsService.find_upcoming_bills(
                transactions,
                upcoming_days,
                today=today,
            )
        return transactions
