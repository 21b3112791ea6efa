"""Savings goals router."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from finwise.application.commands import (
    CreateGoalCommand,
    DeleteGoalCommand,
    UpdateGoalCommand,
)
from finwise.application.queries import GoalWithProgress, ListGoalsQuery
from finwise.domain.reporting.services import SummaryService
from finwise.presentation.api.dependencies import RepoFactory
from finwise.presentation.api.schemas.goals import (
    GoalCreateRequest,
    GoalResponse,
    GoalUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(goal) -> GoalResponse:
    progress = SummaryService.goal_progress(goal).progress
    return GoalResponse.from_result(GoalWithProgress(goal=goal, progress=progress))


@router.get("", summary="List goals with progress")
async def list_goals(factory: RepoFactory) -> list[GoalResponse]:
    """List goals; `progress` is clamped to 0-100 per goal."""
    query = ListGoalsQuery.from_factory(factory)
    items = await query.execute()
    return [GoalResponse.from_result(item) for item in items]


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a goal")
async def create_goal(
    request: GoalCreateRequest,
    factory: RepoFactory,
) -> GoalResponse:
    command = CreateGoalCommand.from_factory(factory)

    try:
        goal = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _to_response(goal)


@router.put(
    "/{goal_id}",
    summary="Update a goal",
    responses={404: {"description": "Goal not found"}},
)
async def update_goal(
    goal_id: UUID,
    request: GoalUpdateRequest,
    factory: RepoFactory,
) -> GoalResponse:
    command = UpdateGoalCommand.from_factory(factory)

    try:
        goal = await command.execute(
            goal_id=goal_id,
            changes=request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return _to_response(goal)


@router.delete(
    "/{goal_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a goal",
    responses={404: {"description": "Goal not found"}},
)
async def delete_goal(goal_id: UUID, factory: RepoFactory) -> None:
    command = DeleteGoalCommand.from_factory(factory)

    try:
        await command.execute(goal_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
