"""Investment record."""

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
    require_text,
)
from finwise.domain.ledger.value_objects import InvestmentType
from finwise.domain.shared.exceptions import ErrorCode, ValidationError
from finwise.domain.shared.numbers import ZERO, parse_decimal, parse_money


@dataclass(frozen=True)
class InvestmentRecord:
    """Immutable investment snapshot.

    ``interest_rate`` is an annual percentage (``12.5`` means 12.5% a year).
    """

    name: str
    type: InvestmentType
    amount: Decimal
    interest_rate: Decimal
    start_date: date
    maturity_date: Optional[date] = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        rid = self.id
        set_ = object.__setattr__

        set_(self, "name", require_text(self.name, "name", rid))
        set_(self, "type", coerce_enum(InvestmentType, self.type, "type", rid))
        set_(self, "amount", parse_money(self.amount, "amount", rid))
        set_(
            self,
            "interest_rate",
            parse_decimal(self.interest_rate, "interest_rate", rid),
        )
        if self.amount < ZERO or self.interest_rate < ZERO:
            raise ValidationError(
                f"Amount and interest rate cannot be negative on investment '{rid}'",
                ErrorCode.INVALID_AMOUNT,
                details={"record_id": str(rid)},
            )
        set_(self, "start_date", coerce_date(self.start_date, "start_date", rid))
        set_(
            self,
            "maturity_date",
            coerce_optional_date(self.maturity_date, "maturity_date", rid),
        )
        if self.maturity_date is not None and self.maturity_date < self.start_date:
            raise ValidationError(
                f"Maturity date precedes start date on investment '{rid}'",
                ErrorCode.INVALID_DATE,
                details={"field": "maturity_date", "record_id": str(rid)},
            )

    def with_changes(self, **changes: Any) -> InvestmentRecord:
        return replace(self, **changes)
