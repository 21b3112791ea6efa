"""Goal repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from finwise.domain.ledger.entities import GoalRecord


class GoalRepository(ABC):
    """Repository interface for GoalRecord persistence."""

    @abstractmethod
    async def save(self, goal: GoalRecord) -> None:
        """Insert or update a goal."""

    @abstractmethod
    async def find_by_id(self, goal_id: UUID) -> Optional[GoalRecord]:
        """Find goal by ID."""

    @abstractmethod
    async def find_all(self) -> List[GoalRecord]:
        """Find all goals."""

    @abstractmethod
    async def delete(self, goal_id: UUID) -> bool:
        """Delete a goal. Returns False when it did not exist."""
