"""Create, edit and delete categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from finwise.domain.ledger.entities import CategoryRecord
from finwise.domain.ledger.exceptions import CategoryInUseError, CategoryNotFoundError
from finwise.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateCategoryCommand:
    def __init__(self, category_repository: CategoryRepository):
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateCategoryCommand:
        return cls(category_repository=factory.category_repository())

    async def execute(self, **fields: Any) -> CategoryRecord:
        category = CategoryRecord(**fields)
        await self._category_repo.save(category)
        logger.info("Created %s category '%s'", category.type.value, category.name)
        return category


class UpdateCategoryCommand:
    """Rename or recolor a category.

    Switching the type is refused while transactions still reference the
    category, since they would no longer match it.
    """

    def __init__(
        self,
        category_repository: CategoryRepository,
        transaction_repository: TransactionRepository,
    ):
        self._category_repo = category_repository
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            transaction_repository=factory.transaction_repository(),
        )

    async def execute(
        self,
        category_id: UUID,
        changes: dict[str, Any],
    ) -> CategoryRecord:
        existing = await self._category_repo.find_by_id(category_id)
        if not existing:
            raise CategoryNotFoundError(category_id)

        updated = existing.with_changes(**changes)
        if updated.type != existing.type:
            in_use = await self._transaction_repo.count_by_category(category_id)
            if in_use:
                raise CategoryInUseError(category_id, in_use)

        await self._category_repo.save(updated)
        logger.info("Updated category %s: %s", category_id, sorted(changes))
        return updated


class DeleteCategoryCommand:
    """Delete a category that no transaction references."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        transaction_repository: TransactionRepository,
    ):
        self._category_repo = category_repository
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteCategoryCommand:
        return cls(
            category_repository=factory.category_repository(),
            transaction_repository=factory.transaction_repository(),
        )

    async def execute(self, category_id: UUID) -> None:
        in_use = await self._transaction_repo.count_by_category(category_id)
        if in_use:
            raise CategoryInUseError(category_id, in_use)

        deleted = await self._category_repo.delete(category_id)
        if not deleted:
            raise CategoryNotFoundError(category_id)
        logger.info("Deleted category %s", category_id)
