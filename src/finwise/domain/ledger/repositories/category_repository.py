"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from finwise.domain.ledger.entities import CategoryRecord
from finwise.domain.ledger.value_objects import TransactionType


class CategoryRepository(ABC):
    """Repository interface for CategoryRecord persistence."""

    @abstractmethod
    async def save(self, category: CategoryRecord) -> None:
        """Insert or update a category."""

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[CategoryRecord]:
        """Find category by ID."""

    @abstractmethod
    async def find_all(self) -> List[CategoryRecord]:
        """Find all categories ordered by name."""

    @abstractmethod
    async def find_by_type(
        self,
        category_type: TransactionType,
    ) -> List[CategoryRecord]:
        """Find income or expense categories."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> bool:
        """Delete a category. Returns False when it did not exist."""
