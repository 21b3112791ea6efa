"""Ledger domain: transactions, categories, goals and investments."""

from finwise.domain.ledger.entities import (
    CategoryRecord,
    GoalRecord,
    InvestmentRecord,
    TransactionRecord,
)
from finwise.domain.ledger.value_objects import (
    ExpenseType,
    InvestmentType,
    TransactionStatus,
    TransactionType,
)

__all__ = [
    "CategoryRecord",
    "ExpenseType",
    "GoalRecord",
    "InvestmentRecord",
    "InvestmentType",
    "TransactionRecord",
    "TransactionStatus",
    "TransactionType",
]
