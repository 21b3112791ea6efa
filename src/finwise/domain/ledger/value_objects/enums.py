"""Enumerations for ledger records."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class TransactionStatus(str, Enum):
    """Settlement state of a transaction."""

    PENDING = "pending"
    PAID = "paid"  # Expense settled
    RECEIVED = "received"  # Income settled
    OVERDUE = "overdue"  # Expense past its due date

    def allowed_for(self, transaction_type: TransactionType) -> bool:
        return self in ALLOWED_STATUSES[transaction_type]


ALLOWED_STATUSES: dict[TransactionType, frozenset[TransactionStatus]] = {
    TransactionType.INCOME: frozenset(
        {TransactionStatus.PENDING, TransactionStatus.RECEIVED},
    ),
    TransactionType.EXPENSE: frozenset(
        {
            TransactionStatus.PENDING,
            TransactionStatus.PAID,
            TransactionStatus.OVERDUE,
        },
    ),
}

REALIZED_STATUS: dict[TransactionType, TransactionStatus] = {
    TransactionType.INCOME: TransactionStatus.RECEIVED,
    TransactionType.EXPENSE: TransactionStatus.PAID,
}


class ExpenseType(str, Enum):
    """Whether an expense repeats with a fixed amount."""

    FIXED = "fixed"
    VARIABLE = "variable"


class InvestmentType(str, Enum):
    """Kinds of fixed-income and fund investments."""

    CDB = "cdb"
    LCI_LCA = "lci_lca"
    TESOURO_DIRETO = "tesouro_direto"
    FUNDS = "funds"
    OTHER = "other"


class AlertType(str, Enum):
    """What an alert is about; ``related_id`` points at that record."""

    DUE_DATE = "due_date"
    OVERDUE = "overdue"
    GOAL_MILESTONE = "goal_milestone"
    INVESTMENT_MATURITY = "investment_maturity"
