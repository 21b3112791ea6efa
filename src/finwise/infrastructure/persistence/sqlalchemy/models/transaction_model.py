"""SQLAlchemy model for income/expense transactions."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, Date, ForeignKey, Index, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from finwise.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TransactionModel(Base, TimestampMixin):
    """Database model for transactions."""

    __tablename__ = "transactions"

    __table_args__ = (
        Index("ix_transactions_type_date", "type", "date"),
        Index("ix_transactions_status_due_date", "status", "due_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="pending, paid, received or overdue",
    )
    is_recurring: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    due_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    expense_type: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        comment="fixed or variable (expenses only)",
    )
