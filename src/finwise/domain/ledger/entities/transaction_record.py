"""Transaction record: one income or expense entry."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from finwise.domain.ledger.entities._coercion import (
    coerce_date,
    coerce_enum,
    coerce_optional_date,
    coerce_uuid,
    require_text,
)
from finwise.domain.ledger.exceptions import InvalidStatusError
from finwise.domain.ledger.value_objects import (
    REALIZED_STATUS,
    ExpenseType,
    TransactionStatus,
    TransactionType,
)
from finwise.domain.shared.exceptions import ErrorCode, ValidationError
from finwise.domain.shared.numbers import ZERO, parse_money


@dataclass(frozen=True)
class TransactionRecord:
    """Immutable snapshot of a stored transaction.

    Raw storage values are accepted and normalized: ``amount`` may be a
    numeric string, ``date`` an ISO string, ``type``/``status`` plain
    strings. Malformed numbers raise ParseError carrying the record id.
    A status has to fit the type (income: pending/received; expense:
    pending/paid/overdue).
    """

    description: str
    amount: Decimal
    date: date
    type: TransactionType
    category_id: UUID
    status: TransactionStatus
    is_recurring: bool = False
    due_date: Optional[date] = None
    expense_type: Optional[ExpenseType] = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        rid = self.id
        set_ = object.__setattr__  # frozen dataclass workaround

        set_(self, "description", require_text(self.description, "description", rid))
        set_(self, "amount", parse_money(self.amount, "amount", rid))
        if self.amount < ZERO:
            raise ValidationError(
                f"Amount cannot be negative on record '{rid}'",
                ErrorCode.INVALID_AMOUNT,
                details={"field": "amount", "record_id": str(rid)},
            )
        set_(self, "date", coerce_date(self.date, "date", rid))
        set_(self, "type", coerce_enum(TransactionType, self.type, "type", rid))
        set_(self, "status", coerce_enum(TransactionStatus, self.status, "status", rid))
        set_(self, "category_id", coerce_uuid(self.category_id, "category_id", rid))
        set_(self, "due_date", coerce_optional_date(self.due_date, "due_date", rid))

        if not self.status.allowed_for(self.type):
            raise InvalidStatusError(self.status.value, self.type.value, rid)

        if self.expense_type is not None:
            if self.type != TransactionType.EXPENSE:
                raise ValidationError(
                    f"Only expenses can have an expense type (record '{rid}')",
                    details={"field": "expense_type", "record_id": str(rid)},
                )
            set_(
                self,
                "expense_type",
                coerce_enum(ExpenseType, self.expense_type, "expense_type", rid),
            )

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_realized(self) -> bool:
        """Money actually moved: a paid expense or a received income."""
        return self.status == REALIZED_STATUS[self.type]

    @property
    def is_pending(self) -> bool:
        return not self.is_realized

    def with_changes(self, **changes: Any) -> TransactionRecord:
        """Return a copy with ``changes`` applied (validation re-runs)."""
        return replace(self, **changes)
