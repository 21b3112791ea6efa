"""Alert schemas."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from finwise.domain.ledger.entities import AlertRecord
from finwise.domain.ledger.value_objects import AlertType
from finwise.presentation.api.schemas.common import CamelModel


class AlertCreateRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    type: AlertType
    related_id: Optional[UUID] = Field(
        None,
        description="Transaction, goal or investment the alert refers to",
    )


class AlertResponse(CamelModel):
    id: UUID
    title: str
    message: str
    type: AlertType
    is_read: bool
    related_id: Optional[UUID] = None
    created_at: datetime

    @classmethod
    def from_record(cls, record: AlertRecord) -> "AlertResponse":
        return cls(
            id=record.id,
            title=record.title,
            message=record.message,
            type=record.type,
            is_read=record.is_read,
            related_id=record.related_id,
            created_at=record.created_at,
        )
