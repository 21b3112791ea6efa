from finwise.domain.ledger.value_objects.enums import (
    ALLOWED_STATUSES,
    REALIZED_STATUS,
    AlertType,
    ExpenseType,
    InvestmentType,
    TransactionStatus,
    TransactionType,
)

__all__ = [
    "ALLOWED_STATUSES",
    "REALIZED_STATUS",
    "AlertType",
    "ExpenseType",
    "InvestmentType",
    "TransactionStatus",
    "TransactionType",
]
