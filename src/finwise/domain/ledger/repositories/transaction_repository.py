"""Transaction repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from finwise.domain.ledger.entities import TransactionRecord
from finwise.domain.ledger.value_objects import TransactionType


class TransactionRepository(ABC):
    """Repository interface for TransactionRecord persistence."""

    @abstractmethod
    async def save(self, transaction: TransactionRecord) -> None:
        """Insert or update a transaction."""

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[TransactionRecord]:
        """Find transaction by ID."""

    @abstractmethod
    async def find_all(self) -> List[TransactionRecord]:
        """Find all transactions, newest first."""

    @abstractmethod
    async def find_by_date_range(
        self,
        start: date,
        end: date,
    ) -> List[TransactionRecord]:
        """Find transactions dated within [start, end] (inclusive)."""

    @abstractmethod
    async def find_by_type(
        self,
        transaction_type: TransactionType,
    ) -> List[TransactionRecord]:
        """Find all income or all expense transactions."""

    @abstractmethod
    async def count_by_category(self, category_id: UUID) -> int:
        """Count transactions filed under a category."""

    @abstractmethod
    async def delete(self, transaction_id: UUID) -> bool:
        """Delete a transaction. Returns False when it did not exist."""
