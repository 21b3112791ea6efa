"""Application commands - write use cases."""

from finwise.application.commands.ledger import (
    CreateAlertCommand,
    CreateCategoryCommand,
    CreateGoalCommand,
    CreateInvestmentCommand,
    CreateTransactionCommand,
    DeleteAlertCommand,
    DeleteCategoryCommand,
    DeleteGoalCommand,
    DeleteInvestmentCommand,
    DeleteTransactionCommand,
    MarkAlertReadCommand,
    UpdateCategoryCommand,
    UpdateGoalCommand,
    UpdateInvestmentCommand,
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
