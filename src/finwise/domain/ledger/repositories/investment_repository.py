"""Investment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from finwise.domain.ledger.entities import InvestmentRecord


class InvestmentRepository(ABC):
    """Repository interface for InvestmentRecord persistence."""

    @abstractmethod
    async def save(self, investment: InvestmentRecord) -> None:
        """Insert or update an investment."""

    @abstractmethod
    async def find_by_id(self, investment_id: UUID) -> Optional[InvestmentRecord]:
        """Find investment by ID."""

    @abstractmethod
    async def find_all(self) -> List[InvestmentRecord]:
        """Find all investments."""

    @abstractmethod
    async def delete(self, investment_id: UUID) -> bool:
        """Delete an investment. Returns False when it did not exist."""
