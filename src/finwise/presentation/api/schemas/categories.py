"""Category schemas."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from finwise.domain.ledger.entities import CategoryRecord
from finwise.domain.ledger.value_objects import TransactionType
from finwise.presentation.api.schemas.common import CamelModel


class CategoryCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    type: TransactionType
    color: Optional[str] = Field(
        None,
        max_length=20,
        description="Hex color; a palette color is used when omitted",
    )
    icon: Optional[str] = Field(None, max_length=50)


class CategoryUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[TransactionType] = None
    color: Optional[str] = Field(None, max_length=20)
    icon: Optional[str] = Field(None, max_length=50)


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    type: TransactionType
    color: Optional[str] = None
    icon: Optional[str] = None

    @classmethod
    def from_record(cls, record: CategoryRecord) -> "CategoryResponse":
        return cls(
            id=record.id,
            name=record.name,
            type=record.type,
            color=record.color,
            icon=record.icon,
        )
