"""SQLAlchemy models for persistence layer."""

from finwise.infrastructure.persistence.sqlalchemy.models.alert_model import (
    AlertModel,
)
from finwise.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from finwise.infrastructure.persistence.sqlalchemy.models.category_model import (
    CategoryModel,
)
from finwise.infrastructure.persistence.sqlalchemy.models.goal_model import GoalModel
from finwise.infrastructure.persistence.sqlalchemy.models.investment_model import (
    InvestmentModel,
)
from finwise.infrastructure.persistence.sqlalchemy.models.transaction_model import (
    TransactionModel,
)

__all__ = [
    "AlertModel",
    "Base",
    "CategoryModel",
    "GoalModel",
    "InvestmentModel",
    "TimestampMixin",
    "TransactionModel",
]
