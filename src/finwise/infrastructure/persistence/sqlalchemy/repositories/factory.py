"""SQLAlchemy repository factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from finwise.infrastructure.persistence.sqlalchemy.repositories.alert_repository import (  # NOQA: E501
    AlertRepositorySQLAlchemy,
)
from finwise.infrastructure.persistence.sqlalchemy.repositories.category_repository import (  # NOQA: E501
    CategoryRepositorySQLAlchemy,
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


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol."""

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._transaction_repo: TransactionRepositorySQLAlchemy | None = None
        self._category_repo: CategoryRepositorySQLAlchemy | None = None
        self._goal_repo: GoalRepositorySQLAlchemy | None = None
        self._investment_repo: InvestmentRepositorySQLAlchemy | None = None
        self._alert_repo: AlertRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def transaction_repository(self) -> TransactionRepositorySQLAlchemy:
        if self._transaction_repo is None:
            self._transaction_repo = TransactionRepositorySQLAlchemy(self._session)
        return self._transaction_repo

    def category_repository(self) -> CategoryRepositorySQLAlchemy:
        if self._category_repo is None:
            self._category_repo = CategoryRepositorySQLAlchemy(self._session)
        return self._category_repo

    def goal_repository(self) -> GoalRepositorySQLAlchemy:
        if self._goal_repo is None:
            self._goal_repo = GoalRepositorySQLAlchemy(self._session)
        return self._goal_repo

    def investment_repository(self) -> InvestmentRepositorySQLAlchemy:
        if self._investment_repo is None:
            self._investment_repo = InvestmentRepositorySQLAlchemy(self._session)
        return self._investment_repo

    def alert_repository(self) -> AlertRepositorySQLAlchemy:
        if self._alert_repo is None:
            self._alert_repo = AlertRepositorySQLAlchemy(self._session)
        return self._alert_repo
