"""List alerts, newest first."""

from __future__ import annotations

from typing import TYPE_CHECKING

from finwise.domain.ledger.entities import AlertRecord
from finwise.domain.ledger.repositories import AlertRepository

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


class ListAlertsQuery:
    def __init__(self, alert_repository: AlertRepository):
        self._alert_repo = alert_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListAlertsQuery:
        return cls(alert_repository=factory.alert_repository())

    async def execute(self, unread_only: bool = False) -> list[AlertRecord]:
        return await self._alert_repo.find_all(unread_only=unread_only)
