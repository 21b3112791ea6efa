"""Create, edit and delete income/expense transactions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from uuid import UUID

from finwise.domain.ledger.entities import CategoryRecord, TransactionRecord
from finwise.domain.ledger.exceptions import (
    CategoryNotFoundError,
    CategoryTypeMismatchError,
    TransactionNotFoundError,
)
from finwise.domain.ledger.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from finwise.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


async def _load_matching_category(
    category_repo: CategoryRepository,
    transaction: TransactionRecord,
) -> CategoryRecord:
    category = await category_repo.find_by_id(transaction.category_id)
    if not category:
        raise CategoryNotFoundError(transaction.category_id)
    if category.type != transaction.type:
        raise CategoryTypeMismatchError(
            category_name=category.name,
            category_type=category.type.value,
            transaction_type=transaction.type.value,
        )
    return category


class CreateTransactionCommand:
    """Record a new transaction under an existing category of the same type."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> CreateTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(self, **fields: Any) -> TransactionRecord:
        # Record construction validates amounts, dates and status/type fit
        transaction = TransactionRecord(**fields)
        await _load_matching_category(self._category_repo, transaction)

        await self._transaction_repo.save(transaction)
        logger.info(
            "Created %s transaction %s (%s)",
            transaction.type.value,
            transaction.id,
            transaction.amount,
        )
        return transaction


class UpdateTransactionCommand:
    """Apply a partial update to a transaction."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transaction_repo = transaction_repository
        self._category_repo = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateTransactionCommand:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    async def execute(
        self,
        transaction_id: UUID,
        changes: dict[str, Any],
    ) -> TransactionRecord:
        existing = await self._transaction_repo.find_by_id(transaction_id)
        if not existing:
            raise TransactionNotFoundError(transaction_id)

        updated = existing.with_changes(**changes)
        if {"type", "category_id"} & changes.keys():
            await _load_matching_category(self._category_repo, updated)

        await self._transaction_repo.save(updated)
        logger.info("Updated transaction %s: %s", transaction_id, sorted(changes))
        return updated


class DeleteTransactionCommand:
    """Delete a transaction."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> DeleteTransactionCommand:
        return cls(transaction_repository=factory.transaction_repository())

    async def execute(self, transaction_id: UUID) -> None:
        deleted = await self._transaction_repo.delete(transaction_id)
        if not deleted:
            raise TransactionNotFoundError(transaction_id)
        logger.info("Deleted transaction %s", transaction_id)
