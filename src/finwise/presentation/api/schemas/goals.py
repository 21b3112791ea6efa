"""Savings goal schemas."""

import datetime as dt
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from finwise.application.queries import GoalWithProgress
from finwise.presentation.api.schemas.common import CamelModel


class GoalCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    target_amount: Decimal = Field(..., description="Amount to reach")
    current_amount: Decimal = Field(Decimal("0"), description="Amount saved so far")
    target_date: Optional[dt.date] = None
    description: Optional[str] = None


class GoalUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    target_amount: Optional[Decimal] = None
    current_amount: Optional[Decimal] = None
    target_date: Optional[dt.date] = None
    description: Optional[str] = None


class GoalResponse(CamelModel):
    """A goal with its completion percentage, clamped to 0-100."""

    id: UUID
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: Optional[dt.date] = None
    description: Optional[str] = None
    progress: Decimal = Field(..., description="Completion percentage (0-100)")

    @classmethod
    def from_result(cls, item: GoalWithProgress) -> "GoalResponse":
        goal = item.goal
        return cls(
            id=goal.id,
            name=goal.name,
            target_amount=goal.target_amount,
            current_amount=goal.current_amount,
            target_date=goal.target_date,
            description=goal.description,
            progress=item.progress,
        )
