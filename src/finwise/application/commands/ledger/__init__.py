"""Ledger commands - writes to every stored record type."""

from finwise.application.commands.ledger.alert_commands import (
    CreateAlertCommand,
    DeleteAlertCommand,
    MarkAlertReadCommand,
)
from finwise.application.commands.ledger.category_commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from finwise.application.commands.ledger.goal_commands import (
    CreateGoalCommand,
    DeleteGoalCommand,
    UpdateGoalCommand,
)
from finwise.application.commands.ledger.investment_commands import (
    CreateInvestmentCommand,
    DeleteInvestmentCommand,
    UpdateInvestmentCommand,
)
from finwise.application.commands.ledger.transaction_commands import (
    CreateTransactionCommand,
    DeleteTransactionCommand,
    UpdateTransactionCommand,
)

__all__ = [
    "CreateAlertCommand",
    "CreateCategoryCommand",
    "CreateGoalCommand",
    "CreateInvestmentCommand",
    "CreateTransactionCommand",
    "DeleteAlertCommand",
    "DeleteCategoryCommand",
    "DeleteGoalCommand",
    "DeleteInvestmentCommand",
    "DeleteTransactionCommand",
    "MarkAlertReadCommand",
    "UpdateCategoryCommand",
    "UpdateGoalCommand",
    "UpdateInvestmentCommand",
    "UpdateTransactionCommand",
]
