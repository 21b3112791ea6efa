"""SQLAlchemy implementation of AlertRepository."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finwise.domain.ledger.entities import AlertRecord
from finwise.domain.ledger.repositories import AlertRepository
from finwise.infrastructure.persistence.sqlalchemy.models import AlertModel

logger = logging.getLogger(__name__)


class AlertRepositorySQLAlchemy(AlertRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, alert: AlertRecord) -> None:
        model = await self._session.get(AlertModel, alert.id)
        if model is None:
            logger.debug("Creating %s alert: %s", alert.type.value, alert.title)
            model = AlertModel(id=alert.id, created_at=alert.created_at)
            self._session.add(model)

        model.title = alert.title
        model.message = alert.message
        model.type = alert.type.value
        model.is_read = alert.is_read
        model.related_id = alert.related_id
        await self._session.flush()

    async def find_by_id(self, alert_id: UUID) -> Optional[AlertRecord]:
        model = await self._session.get(AlertModel, alert_id)
        return self._map_to_domain(model) if model else None

    async def find_all(self, unread_only: bool = False) -> list[AlertRecord]:
        stmt = select(AlertModel)
        if unread_only:
            stmt = stmt.where(AlertModel.is_read.is_(False))
        stmt = stmt.order_by(AlertModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def delete(self, alert_id: UUID) -> bool:
        model = await self._session.get(AlertModel, alert_id)
        if not model:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True

    def _map_to_domain(self, model: AlertModel) -> AlertRecord:
        return AlertRecord(
            id=model.id,
            title=model.title,
            message=model.message,
            type=model.type,
            is_read=model.is_read,
            related_id=model.related_id,
            created_at=model.created_at,
        )
