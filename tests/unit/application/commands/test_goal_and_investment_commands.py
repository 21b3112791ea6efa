"""Unit tests for the goal and investment commands."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from finwise.application.commands import (
    CreateGoalCommand,
    CreateInvestmentCommand,
    DeleteGoalCommand,
    DeleteInvestmentCommand,
    UpdateGoalCommand,
    UpdateInvestmentCommand,
)
from finwise.domain.ledger.exceptions import (
    GoalNotFoundError,
    InvestmentNotFoundError,
)
from finwise.domain.ledger.value_objects import InvestmentType
from finwise.domain.shared.exceptions import ValidationError


@pytest.fixture
def mock_repo():
    return AsyncMock()


class TestGoalCommands:
    """Tests for the goal commands."""

    @pytest.mark.asyncio
    async def test_create(self, mock_repo):
        goal = await CreateGoalCommand(mock_repo).execute(
            name="Vacation",
            target_amount=Decimal("5000.00"),
            current_amount=Decimal("1200.00"),
            target_date=date(2026, 7, 1),
        )

        assert goal.remaining_amount == Decimal("3800.00")
        mock_repo.save.assert_awaited_once_with(goal)

    @pytest.mark.asyncio
    async def test_update_current_amount(self, mock_repo, make_goal):
        existing = make_goal("1000.00", "100.00")
        mock_repo.find_by_id.return_value = existing

        updated = await UpdateGoalCommand(mock_repo).execute(
            existing.id,
            {"current_amount": Decimal("400.00")},
        )

        assert updated.current_amount == Decimal("400.00")
        assert updated.target_amount == Decimal("1000.00")

    @pytest.mark.asyncio
    async def test_update_rejects_negative_amount(self, mock_repo, make_goal):
        existing = make_goal()
        mock_repo.find_by_id.return_value = existing

        with pytest.raises(ValidationError):
            await UpdateGoalCommand(mock_repo).execute(
                existing.id,
                {"current_amount": Decimal("-1")},
            )

        mock_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_missing(self, mock_repo):
        mock_repo.find_by_id.return_value = None

        with pytest.raises(GoalNotFoundError):
            await UpdateGoalCommand(mock_repo).execute(uuid4(), {"name": "x"})

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_repo):
        mock_repo.delete.return_value = False

        with pytest.raises(GoalNotFoundError):
            await DeleteGoalCommand(mock_repo).execute(uuid4())


class TestInvestmentCommands:
    """Tests for the investment commands."""

    @pytest.mark.asyncio
    async def test_create(self, mock_repo):
        investment = await CreateInvestmentCommand(mock_repo).execute(
            name="LCI 2026",
            type=InvestmentType.LCI_LCA,
            amount=Decimal("3000.00"),
            interest_rate=Decimal("9.75"),
            start_date=date(2025, 1, 2),
        )

        assert investment.type == InvestmentType.LCI_LCA
        mock_repo.save.assert_awaited_once_with(investment)

    @pytest.mark.asyncio
    async def test_update_rate(self, mock_repo, make_investment):
        existing = make_investment()
        mock_repo.find_by_id.return_value = existing

        updated = await UpdateInvestmentCommand(mock_repo).execute(
            existing.id,
            {"interest_rate": Decimal("11.25")},
        )

        assert updated.interest_rate == Decimal("11.25")

    @pytest.mark.asyncio
    async def test_update_missing(self, mock_repo):
        mock_repo.find_by_id.return_value = None

        with pytest.raises(InvestmentNotFoundError):
            await UpdateInvestmentCommand(mock_repo).execute(uuid4(), {"name": "x"})

    @pytest.mark.asyncio
    async def test_delete(self, mock_repo):
        mock_repo.delete.return_value = True
        investment_id = uuid4()

        await DeleteInvestmentCommand(mock_repo).execute(investment_id)

        mock_repo.delete.assert_awaited_once_with(investment_id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_repo):
        mock_repo.delete.return_value = False

        with pytest.raises(InvestmentNotFoundError):
            await DeleteInvestmentCommand(mock_repo).execute(uuid4())
