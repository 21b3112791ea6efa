"""Unit tests for ChartsQuery and TopIncomeByCategoryQuery."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from finwise.application.queries import ChartsQuery, TopIncomeByCategoryQuery
from finwise.domain.ledger.value_objects import TransactionType
from finwise.domain.shared import InvalidParameterError


@pytest.fixture
def mock_transaction_repo():
    """Create a mock transaction repository."""
    return AsyncMock()


@pytest.fixture
def mock_category_repo():
    """Create a mock category repository."""
    return AsyncMock()


class TestChartsQuery:
    """Tests for ChartsQuery."""

    @pytest.mark.asyncio
    async def test_period_filters_category_rollup_only(
        self,
        mock_transaction_repo,
        mock_category_repo,
        make_transaction,
        food,
    ):
        """Should filter the pie by period but keep the full balance window."""
        mock_transaction_repo.find_all.return_value = [
            make_transaction("10.00", on=date(2025, 1, 31), category=food),
            make_transaction("25.00", on=date(2025, 2, 1), category=food),
        ]
        mock_category_repo.find_all.return_value = [food]

        query = ChartsQuery(
            transaction_repository=mock_transaction_repo,
            category_repository=mock_category_repo,
        )
        result = await query.execute(
            year=2025,
            month=2,
            window_months=2,
            as_of=date(2025, 2, 15),
        )

        assert result.has_data is True
        assert result.expenses_by_category[0].value == Decimal("25.00")
        assert [p.expenses for p in result.balance_evolution] == [
            Decimal("10.00"),
            Decimal("25.00"),
        ]

    @pytest.mark.asyncio
    async def test_empty_ledger(self, mock_transaction_repo, mock_category_repo):
        mock_transaction_repo.find_all.return_value = []
        mock_category_repo.find_all.return_value = []

        query = ChartsQuery(mock_transaction_repo, mock_category_repo)
        result = await query.execute()

        assert result.has_data is False

    @pytest.mark.asyncio
    async def test_invalid_period_fails_before_loading(
        self,
        mock_transaction_repo,
        mock_category_repo,
    ):
        query = ChartsQuery(mock_transaction_repo, mock_category_repo)

        with pytest.raises(InvalidParameterError):
            await query.execute(start_date=date(2025, 1, 1))

        mock_transaction_repo.find_all.assert_not_called()

    def test_from_factory(self, mock_transaction_repo, mock_category_repo):
        factory = MagicMock()
        factory.transaction_repository.return_value = mock_transaction_repo
        factory.category_repository.return_value = mock_category_repo

        query = ChartsQuery.from_factory(factory)

        assert query._transaction_repo is mock_transaction_repo
        assert query._category_repo is mock_category_repo


class TestTopIncomeByCategoryQuery:
    """Tests for TopIncomeByCategoryQuery."""

    @pytest.mark.asyncio
    async def test_ranks_income_categories(
        self,
        mock_transaction_repo,
        mock_category_repo,
        make_transaction,
        salary,
        freelance,
    ):
        mock_transaction_repo.find_by_type.return_value = [
            make_transaction("800.00", TransactionType.INCOME, category=freelance),
            make_transaction("4000.00", TransactionType.INCOME, category=salary),
        ]
        mock_category_repo.find_by_type.return_value = [freelance, salary]

        query = TopIncomeByCategoryQuery(mock_transaction_repo, mock_category_repo)
        result = await query.execute(limit=5)

        assert result.has_data is True
        assert [c.name for c in result.items] == ["Salary", "Freelance"]
        mock_transaction_repo.find_by_type.assert_awaited_once_with(
            TransactionType.INCOME,
        )

    @pytest.mark.asyncio
    async def test_no_income(self, mock_transaction_repo, mock_category_repo):
        mock_transaction_repo.find_by_type.return_value = []
        mock_category_repo.find_by_type.return_value = []

        query = TopIncomeByCategoryQuery(mock_transaction_repo, mock_category_repo)
        result = await query.execute()

        assert result.has_data is False
        assert result.items == []
