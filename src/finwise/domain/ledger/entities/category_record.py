"""Category record: a user-defined label with a chart color."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional
from uuid import UUID, uuid4

from finwise.domain.ledger.entities._coercion import coerce_enum, require_text
from finwise.domain.ledger.value_objects import TransactionType


@dataclass(frozen=True)
class CategoryRecord:
    """Immutable category snapshot, scoped to income or expense."""

    name: str
    type: TransactionType
    color: Optional[str] = None
    icon: Optional[str] = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", require_text(self.name, "name", self.id))
        object.__setattr__(
            self,
            "type",
            coerce_enum(TransactionType, self.type, "type", self.id),
        )
        if not self.color:
            object.__setattr__(self, "color", None)

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    def with_changes(self, **changes: Any) -> CategoryRecord:
        return replace(self, **changes)
