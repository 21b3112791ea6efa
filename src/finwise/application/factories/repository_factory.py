"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from finwise.domain.ledger.repositories import (
    AlertRepository,
    CategoryRepository,
    GoalRepository,
    InvestmentRepository,
    TransactionRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is intentionally `Any` to avoid coupling the
        application layer to specific database implementations.
        Use this for commit/rollback at the presentation layer.
        """
        ...

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def goal_repository(self) -> GoalRepository:
        """Get goal repository."""
        ...

    def investment_repository(self) -> InvestmentRepository:
        """Get investment repository."""
        ...

    def alert_repository(self) -> AlertRepository:
        """Get alert repository."""
        ...
