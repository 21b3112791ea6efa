"""Record builders shared by the unit tests.

Builders are exposed as fixtures returning factory functions, so tests
can create as many records as they need.
"""

from datetime import date
from uuid import uuid4

import pytest

from finwise.domain.ledger.entities import (
    CategoryRecord,
    GoalRecord,
    InvestmentRecord,
    TransactionRecord,
)
from finwise.domain.ledger.value_objects import (
    REALIZED_STATUS,
    InvestmentType,
    TransactionType,
)


@pytest.fixture
def make_category():
    def _make(name="Food", type=TransactionType.EXPENSE, color=None):  # NOQA: A002
        return CategoryRecord(name=name, type=type, color=color)

    return _make


@pytest.fixture
def make_transaction():
    """Factory for transactions; status defaults to the realized one."""

    def _make(  # NOQA: PLR0913
        amount="100.00",
        type=TransactionType.EXPENSE,  # NOQA: A002
        status=None,
        on=date(2025, 1, 15),
        category=None,
        description="Test transaction",
        due_date=None,
    ):
        return TransactionRecord(
            description=description,
            amount=amount,
            date=on,
            type=type,
            category_id=category.id if category else uuid4(),
            status=status or REALIZED_STATUS[TransactionType(type)],
            due_date=due_date,
        )

    return _make


@pytest.fixture
def make_goal():
    def _make(target="1000.00", current="0.00", name="Emergency fund"):
        return GoalRecord(name=name, target_amount=target, current_amount=current)

    return _make


@pytest.fixture
def make_investment():
    def _make(amount="1000.00", rate="10.5", name="CDB 2027"):
        return InvestmentRecord(
            name=name,
            type=InvestmentType.CDB,
            amount=amount,
            interest_rate=rate,
            start_date=date(2024, 1, 1),
        )

    return _make


@pytest.fixture
def food(make_category):
    return make_category("Food", TransactionType.EXPENSE, "#ff0000")


@pytest.fixture
def rent(make_category):
    return make_category("Rent", TransactionType.EXPENSE)


@pytest.fixture
def salary(make_category):
    return make_category("Salary", TransactionType.INCOME, "#00ff00")


@pytest.fixture
def freelance(make_category):
    return make_category("Freelance", TransactionType.INCOME)
