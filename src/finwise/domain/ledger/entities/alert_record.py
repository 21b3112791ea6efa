"""Alert record: a notice about a bill, goal or investment."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from finwise.domain.ledger.entities._coercion import (
    coerce_enum,
    coerce_uuid,
    require_text,
)
from finwise.domain.ledger.value_objects import AlertType
from finwise.domain.shared.time import utc_now


@dataclass(frozen=True)
class AlertRecord:
    """Immutable alert snapshot.

    ``related_id`` is the transaction, goal or investment the alert refers
    to, matching ``type``. It is not checked against storage; the record it
    names may since have been deleted.
    """

    title: str
    message: str
    type: AlertType
    is_read: bool = False
    related_id: Optional[UUID] = None
    created_at: datetime = field(default_factory=utc_now)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        rid = self.id
        object.__setattr__(self, "title", require_text(self.title, "title", rid))
        object.__setattr__(
            self,
            "message",
            require_text(self.message, "message", rid),
        )
        object.__setattr__(self, "type", coerce_enum(AlertType, self.type, "type", rid))
        if self.related_id is not None:
            object.__setattr__(
                self,
                "related_id",
                coerce_uuid(self.related_id, "related_id", rid),
            )

    def mark_read(self) -> AlertRecord:
        return replace(self, is_read=True)

    def with_changes(self, **changes: Any) -> AlertRecord:
        return replace(self, **changes)
