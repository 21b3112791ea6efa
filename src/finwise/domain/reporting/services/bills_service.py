"""Upcoming bills: pending transactions due in the next few days."""

from datetime import date, timedelta
from typing import Iterable, Optional

from finwise.domain.ledger.entities import TransactionRecord
from finwise.domain.ledger.value_objects import TransactionStatus
from finwise.domain.shared.exceptions import InvalidParameterError
from finwise.domain.shared.time import today_utc


class BillsService:
    """Find pending transactions with a due date in ``[today, today + days]``."""

    @staticmethod
    def find_upcoming_bills(
        transactions: Iterable[TransactionRecord],
        days: int,
        today: Optional[date] = None,
    ) -> list[TransactionRecord]:
        if days < 0:
            raise InvalidParameterError("days", days, "cannot be negative")

        start = today or today_utc()
        end = start + timedelta(days=days)
        upcoming = [
            t
            for t in transactions
            if t.status == TransactionStatus.PENDING
            and t.due_date is not None
            and start <= t.due_date <= end
        ]
        return sorted(upcoming, key=lambda t: (t.due_date, t.description))
