"""SQLAlchemy repository implementations."""

from finwise.infrastructure.persistence.sqlalchemy.repositories.alert_repository import (  # NOQA: E501
    AlertRepositorySQLAlchemy,
)
from finwise.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
)
from finwise.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from finwise.infrastructure.persistence.sqlalchemy.repositories.goal_repository import (  # NOQA: E501
    GoalRepositorySQLAlchemy,
)
from finwise.infrastructure.persistence.sqlalchemy.repositories.investment_repository import (  # NOQA: E501
    InvestmentRepositorySQLAlchemy,
)
from finwise.infrastructure.persistence.sqlalchemy.repositories.transaction_repository import (  # NOQA: E501
    TransactionRepositorySQLAlchemy,
)

__all__ = [
    "AlertRepositorySQLAlchemy",
    "CategoryRepositorySQLAlchemy",
    "GoalRepositorySQLAlchemy",
    "InvestmentRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "TransactionRepositorySQLAlchemy",
]
