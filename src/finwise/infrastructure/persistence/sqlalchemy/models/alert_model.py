"""SQLAlchemy model for alerts."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import Boolean, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from finwise.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class AlertModel(Base, TimestampMixin):
    __tablename__ = "alerts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    # due_date, overdue, goal_milestone, investment_maturity
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    is_read: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
    )
    related_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
