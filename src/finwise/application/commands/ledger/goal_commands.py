"""Create, edit and delete savings goals."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from finwise.domain.ledger.entities import GoalRecord
from finwise.domain.ledger.exceptions import GoalNotFoundError
from finwise.domain.ledger.repositories import GoalRepository

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateGoalCommand:
    def __init__(self, goal_repository: GoalRepository):
        self._goal_repo = goal_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateGoalCommand:
        return cls(goal_repository=factory.goal_repository())

    async def execute(self, **fields: Any) -> GoalRecord:
        goal = GoalRecord(**fields)
        await self._goal_repo.save(goal)
        logger.info("Created goal '%s' (target %s)", goal.name, goal.target_amount)
        return goal


class UpdateGoalCommand:
    def __init__(self, goal_repository: GoalRepository):
        self._goal_repo = goal_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateGoalCommand:
        return cls(goal_repository=factory.goal_repository())

    async def execute(self, goal_id: UUID, changes: dict[str, Any]) -> GoalRecord:
        existing = await self._goal_repo.find_by_id(goal_id)
        if not existing:
            raise GoalNotFoundError(goal_id)

        updated = existing.with_changes(**changes)
        await self._goal_repo.save(updated)
        logger.info("Updated goal %s: %s", goal_id, sorted(changes))
        return updated


class DeleteGoalCommand:
    def __init__(self, goal_repository: GoalRepository):
        self._goal_repo = goal_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteGoalCommand:
        return cls(goal_repository=factory.goal_repository())

    async def execute(self, goal_id: UUID) -> None:
        if not await self._goal_repo.delete(goal_id):
            raise GoalNotFoundError(goal_id)
        logger.info("Deleted goal %s", goal_id)
