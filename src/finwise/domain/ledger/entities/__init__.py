from finwise.domain.ledger.entities.alert_record import AlertRecord
from finwise.domain.ledger.entities.category_record import CategoryRecord
from finwise.domain.ledger.entities.goal_record import GoalRecord
from finwise.domain.ledger.entities.investment_record import InvestmentRecord
from finwise.domain.ledger.entities.transaction_record import TransactionRecord

__all__ = [
    "AlertRecord",
    "CategoryRecord",
    "GoalRecord",
    "InvestmentRecord",
    "TransactionRecord",
]
