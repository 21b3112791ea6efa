"""Alert repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from finwise.domain.ledger.entities import AlertRecord


class AlertRepository(ABC):
    """Repository interface for AlertRecord persistence."""

    @abstractmethod
    async def save(self, alert: AlertRecord) -> None:
        """Insert or update an alert."""

    @abstractmethod
    async def find_by_id(self, alert_id: UUID) -> Optional[AlertRecord]:
        """Find alert by ID."""

    @abstractmethod
    async def find_all(self, unread_only: bool = False) -> List[AlertRecord]:
        """Find alerts, newest first; optionally only unread ones."""

    @abstractmethod
    async def delete(self, alert_id: UUID) -> bool:
        """Delete an alert. Returns False when it did not exist."""
