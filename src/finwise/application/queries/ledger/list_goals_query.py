"""List savings goals together with their progress."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from finwise.domain.ledger.entities import GoalRecord
from finwise.domain.ledger.repositories import GoalRepository
from finwise.domain.reporting.services import SummaryService

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


@dataclass
class GoalWithProgress:
    """A goal and its completion percentage (clamped to 0-100)."""

    goal: GoalRecord
    progress: Decimal


class ListGoalsQuery:
    """List goals, each with clamped per-goal progress."""

    def __init__(self, goal_repository: GoalRepository):
        self._goal_repo = goal_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListGoalsQuery:
        return cls(goal_repository=factory.goal_repository())

    async def execute(self) -> list[GoalWithProgress]:
        goals = await self._goal_repo.find_all()
        return [
            GoalWithProgress(
                goal=goal,
                progress=SummaryService.goal_progress(goal).progress,
            )
            for goal in goals
        ]
