"""Create alerts, mark them read and delete them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from finwise.domain.ledger.entities import AlertRecord
from finwise.domain.ledger.exceptions import AlertNotFoundError
from finwise.domain.ledger.repositories import AlertRepository

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateAlertCommand:
    def __init__(self, alert_repository: AlertRepository):
        self._alert_repo = alert_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateAlertCommand:
        return cls(alert_repository=factory.alert_repository())

    async def execute(self, **fields: Any) -> AlertRecord:
        alert = AlertRecord(**fields)
        await self._alert_repo.save(alert)
        logger.info("Created %s alert '%s'", alert.type.value, alert.title)
        return alert


class MarkAlertReadCommand:
    """Flag an alert as read. Marking a read alert again is a no-op."""

    def __init__(self, alert_repository: AlertRepository):
        self._alert_repo = alert_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MarkAlertReadCommand:
        return cls(alert_repository=factory.alert_repository())

    async def execute(self, alert_id: UUID) -> AlertRecord:
        alert = await self._alert_repo.find_by_id(alert_id)
        if not alert:
            raise AlertNotFoundError(alert_id)
        if alert.is_read:
            return alert

        updated = alert.mark_read()
        await self._alert_repo.save(updated)
        logger.info("Marked alert %s as read", alert_id)
        return updated


class DeleteAlertCommand:
    def __init__(self, alert_repository: AlertRepository):
        self._alert_repo = alert_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteAlertCommand:
        return cls(alert_repository=factory.alert_repository())

    async def execute(self, alert_id: UUID) -> None:
        if not await self._alert_repo.delete(alert_id):
            raise AlertNotFoundError(alert_id)
        logger.info("Deleted alert %s", alert_id)
