"""Unit tests for the category commands."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from finwise.application.commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from finwise.domain.ledger.exceptions import CategoryInUseError, CategoryNotFoundError
from finwise.domain.ledger.value_objects import TransactionType
from finwise.domain.shared.exceptions import ErrorCode, ValidationError


@pytest.fixture
def mock_category_repo():
    return AsyncMock()


@pytest.fixture
def mock_transaction_repo():
    return AsyncMock()


class TestCreateCategoryCommand:
    """Tests for CreateCategoryCommand."""

    @pytest.mark.asyncio
    async def test_creates(self, mock_category_repo):
        category = await CreateCategoryCommand(mock_category_repo).execute(
            name="Health",
            type=TransactionType.EXPENSE,
            color="#123456",
        )

        assert category.name == "Health"
        mock_category_repo.save.assert_awaited_once_with(category)

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, mock_category_repo):
        with pytest.raises(ValidationError):
            await CreateCategoryCommand(mock_category_repo).execute(
                name=" ",
                type=TransactionType.EXPENSE,
            )


class TestUpdateCategoryCommand:
    """Tests for UpdateCategoryCommand."""

    @pytest.mark.asyncio
    async def test_rename(self, mock_category_repo, mock_transaction_repo, food):
        mock_category_repo.find_by_id.return_value = food

        command = UpdateCategoryCommand(mock_category_repo, mock_transaction_repo)
        updated = await command.execute(food.id, {"name": "Groceries"})

        assert updated.name == "Groceries"
        assert updated.id == food.id
        mock_transaction_repo.count_by_category.assert_not_called()

    @pytest.mark.asyncio
    async def test_type_change_refused_while_in_use(
        self,
        mock_category_repo,
        mock_transaction_repo,
        food,
    ):
        mock_category_repo.find_by_id.return_value = food
        mock_transaction_repo.count_by_category.return_value = 3

        command = UpdateCategoryCommand(mock_category_repo, mock_transaction_repo)
        with pytest.raises(CategoryInUseError):
            await command.execute(food.id, {"type": TransactionType.INCOME})

        mock_category_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_type_change_allowed_when_unused(
        self,
        mock_category_repo,
        mock_transaction_repo,
        food,
    ):
        mock_category_repo.find_by_id.return_value = food
        mock_transaction_repo.count_by_category.return_value = 0

        command = UpdateCategoryCommand(mock_category_repo, mock_transaction_repo)
        updated = await command.execute(food.id, {"type": TransactionType.INCOME})

        assert updated.is_income

    @pytest.mark.asyncio
    async def test_missing_category(self, mock_category_repo, mock_transaction_repo):
        mock_category_repo.find_by_id.return_value = None

        command = UpdateCategoryCommand(mock_category_repo, mock_transaction_repo)
        with pytest.raises(CategoryNotFoundError):
            await command.execute(uuid4(), {"name": "x"})


class TestDeleteCategoryCommand:
    """Tests for DeleteCategoryCommand."""

    @pytest.mark.asyncio
    async def test_in_use_category_is_kept(
        self,
        mock_category_repo,
        mock_transaction_repo,
    ):
        mock_transaction_repo.count_by_category.return_value = 2

        command = DeleteCategoryCommand(mock_category_repo, mock_transaction_repo)
        with pytest.raises(CategoryInUseError) as exc_info:
            await command.execute(uuid4())

        assert exc_info.value.code == ErrorCode.CATEGORY_IN_USE
        assert exc_info.value.details["transaction_count"] == 2
        mock_category_repo.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_deletes_unused(self, mock_category_repo, mock_transaction_repo):
        mock_transaction_repo.count_by_category.return_value = 0
        mock_category_repo.delete.return_value = True
        category_id = uuid4()

        command = DeleteCategoryCommand(mock_category_repo, mock_transaction_repo)
        await command.execute(category_id)

        mock_category_repo.delete.assert_awaited_once_with(category_id)

    @pytest.mark.asyncio
    async def test_missing_category(self, mock_category_repo, mock_transaction_repo):
        mock_transaction_repo.count_by_category.return_value = 0
        mock_category_repo.delete.return_value = False

        command = DeleteCategoryCommand(mock_category_repo, mock_transaction_repo)
        with pytest.raises(CategoryNotFoundError):
            await command.execute(uuid4())
