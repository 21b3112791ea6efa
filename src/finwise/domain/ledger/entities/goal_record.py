"""Savings goal record."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID, uuid4

from finwise.domain.ledger.entities._coercion import (
    coerce_optional_date,
    require_text,
)
from finwise.domain.shared.exceptions import ErrorCode, ValidationError
from finwise.domain.shared.numbers import ZERO, parse_money


@dataclass(frozen=True)
class GoalRecord:
    """Immutable savings goal snapshot."""

    name: str
    target_amount: Decimal
    current_amount: Decimal = ZERO
    target_date: Optional[date] = None
    description: Optional[str] = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        rid = self.id
        object.__setattr__(self, "name", require_text(self.name, "name", rid))
        for name in ("target_amount", "current_amount"):
            amount = parse_money(getattr(self, name), name, rid)
            if amount < ZERO:
                raise ValidationError(
                    f"'{name}' cannot be negative on goal '{rid}'",
                    ErrorCode.INVALID_AMOUNT,
                    details={"field": name, "record_id": str(rid)},
                )
            object.__setattr__(self, name, amount)
        object.__setattr__(
            self,
            "target_date",
            coerce_optional_date(self.target_date, "target_date", rid),
        )

    @property
    def remaining_amount(self) -> Decimal:
        return max(self.target_amount - self.current_amount, ZERO)

    @property
    def is_reached(self) -> bool:
        return self.target_amount > ZERO and self.current_amount >= self.target_amount

    def with_changes(self, **changes: Any) -> GoalRecord:
        return replace(self, **changes)
