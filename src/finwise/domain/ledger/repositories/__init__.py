from finwise.domain.ledger.repositories.alert_repository import AlertRepository
from finwise.domain.ledger.repositories.category_repository import CategoryRepository
from finwise.domain.ledger.repositories.goal_repository import GoalRepository
from finwise.domain.ledger.repositories.investment_repository import (
    InvestmentRepository,
)
from finwise.domain.ledger.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = [
    "AlertRepository",
    "CategoryRepository",
    "GoalRepository",
    "InvestmentRepository",
    "TransactionRepository",
]
