"""List categories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from finwise.domain.ledger.entities import CategoryRecord
from finwise.domain.ledger.repositories import CategoryRepository
from finwise.domain.ledger.value_objects import TransactionType

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory


class ListCategoriesQuery:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListCategoriesQuery:
        return cls(category_repository=factory.category_repository())

    async def execute(
        self,
        category_type: Optional[TransactionType] = None,
    ) -> list[CategoryRecord]:
        if category_type is None:
            return await self._category_repo.find_all()
        return await self._category_repo.find_by_type(TransactionType(category_type))
