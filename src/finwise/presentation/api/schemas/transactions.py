"""Transaction schemas for API request/response models."""

import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from finwise.domain.ledger.entities import TransactionRecord
from finwise.domain.ledger.value_objects import (
    ExpenseType,
    TransactionStatus,
    TransactionType,
)
from finwise.presentation.api.schemas.common import CamelModel


class TransactionCreateRequest(CamelModel):
    """Request schema for recording an income or expense."""

    description: str = Field(..., min_length=1, max_length=500)
    amount: Decimal = Field(..., description="Non-negative amount, at most 2 decimals")
    date: dt.date = Field(..., description="Transaction date")
    type: TransactionType
    category_id: UUID = Field(..., description="Category of the same type")
    status: TransactionStatus = Field(
        ...,
        description="income: pending/received; expense: pending/paid/overdue",
    )
    is_recurring: bool = False
    due_date: Optional[dt.date] = None
    expense_type: Optional[ExpenseType] = Field(
        None,
        description="fixed or variable (expenses only)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "description": "Rent",
                "amount": "1500.00",
                "date": "2025-01-05",
                "type": "expense",
                "categoryId": "550e8400-e29b-41d4-a716-446655440000",
                "status": "paid",
                "isRecurring": True,
                "dueDate": "2025-01-05",
                "expenseType": "fixed",
            },
        },
    )


class TransactionUpdateRequest(CamelModel):
    """Partial update; only fields that are sent are changed."""

    description: Optional[str] = Field(None, min_length=1, max_length=500)
    amount: Optional[Decimal] = None
    date: Optional[dt.date] = None
    type: Optional[TransactionType] = None
    category_id: Optional[UUID] = None
    status: Optional[TransactionStatus] = None
    is_recurring: Optional[bool] = None
    due_date: Optional[dt.date] = None
    expense_type: Optional[ExpenseType] = None


class TransactionResponse(CamelModel):
    id: UUID
    description: str
    amount: Decimal
    date: dt.date
    type: TransactionType
    category_id: UUID
    status: TransactionStatus
    is_recurring: bool
    due_date: Optional[dt.date] = None
    expense_type: Optional[ExpenseType] = None

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionResponse":
        return cls(
            id=record.id,
            description=record.description,
            amount=record.amount,
            date=record.date,
            type=record.type,
            category_id=record.category_id,
            status=record.status,
            is_recurring=record.is_recurring,
            due_date=record.due_date,
            expense_type=record.expense_type,
        )
