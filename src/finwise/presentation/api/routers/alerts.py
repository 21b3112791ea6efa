"""Alerts router: due dates, overdue bills, goal milestones and maturities."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from finwise.application.commands import (
    CreateAlertCommand,
    DeleteAlertCommand,
    MarkAlertReadCommand,
)
from finwise.application.queries import ListAlertsQuery
from finwise.presentation.api.dependencies import RepoFactory
from finwise.presentation.api.schemas.alerts import AlertCreateRequest, AlertResponse

logger = logging.getLogger(__name__)

router = APIRouter()

UnreadFilter = Annotated[bool, Query(description="Only alerts not yet read")]


@router.get("", summary="List alerts")
async def list_alerts(
    factory: RepoFactory,
    unread: UnreadFilter = False,
) -> list[AlertResponse]:
    """List alerts, newest first."""
    query = ListAlertsQuery.from_factory(factory)
    alerts = await query.execute(unread_only=unread)
    return [AlertResponse.from_record(a) for a in alerts]


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create an alert")
async def create_alert(
    request: AlertCreateRequest,
    factory: RepoFactory,
) -> AlertResponse:
    command = CreateAlertCommand.from_factory(factory)

    try:
        alert = await command.execute(**request.model_dump())
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return AlertResponse.from_record(alert)


@router.put(
    "/{alert_id}/read",
    summary="Mark an alert as read",
    responses={404: {"description": "Alert not found"}},
)
async def mark_alert_read(alert_id: UUID, factory: RepoFactory) -> AlertResponse:
    command = MarkAlertReadCommand.from_factory(factory)

    try:
        alert = await command.execute(alert_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return AlertResponse.from_record(alert)


@router.delete(
    "/{alert_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an alert",
    responses={404: {"description": "Alert not found"}},
)
async def delete_alert(alert_id: UUID, factory: RepoFactory) -> None:
    command = DeleteAlertCommand.from_factory(factory)

    try:
        await command.execute(alert_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
