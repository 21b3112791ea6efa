"""Ledger domain exceptions."""

from typing import Any
from uuid import UUID

from finwise.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidStatusError(ValidationError):
    """Raised when a transaction status does not fit its type."""

    def __init__(self, status: str, transaction_type: str, record_id: Any) -> None:
        super().__init__(
            message=f"Status '{status}' is not valid for {transaction_type} "
            f"transaction '{record_id}'",
            code=ErrorCode.INVALID_STATUS,
            details={
                "status": status,
                "type": transaction_type,
                "record_id": str(record_id),
            },
        )


class TransactionNotFoundError(EntityNotFoundError):
    """Raised when a transaction cannot be found."""

    def __init__(self, transaction_id: UUID) -> None:
        super().__init__(
            message=f"Transaction '{transaction_id}' not found",
            code=ErrorCode.TRANSACTION_NOT_FOUND,
            details={"transaction_id": str(transaction_id)},
        )


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: UUID) -> None:
        super().__init__(
            message=f"Category '{category_id}' not found",
            code=ErrorCode.CATEGORY_NOT_FOUND,
            details={"category_id": str(category_id)},
        )


class GoalNotFoundError(EntityNotFoundError):
    """Raised when a goal cannot be found."""

    def __init__(self, goal_id: UUID) -> None:
        super().__init__(
            message=f"Goal '{goal_id}' not found",
            code=ErrorCode.GOAL_NOT_FOUND,
            details={"goal_id": str(goal_id)},
        )


class InvestmentNotFoundError(EntityNotFoundError):
    """Raised when an investment cannot be found."""

    def __init__(self, investment_id: UUID) -> None:
        super().__init__(
            message=f"Investment '{investment_id}' not found",
            code=ErrorCode.INVESTMENT_NOT_FOUND,
            details={"investment_id": str(investment_id)},
        )


class AlertNotFoundError(EntityNotFoundError):
    def __init__(self, alert_id: UUID) -> None:
        super().__init__(
            message=f"Alert '{alert_id}' not found",
            code=ErrorCode.ALERT_NOT_FOUND,
            details={"alert_id": str(alert_id)},
        )


class CategoryTypeMismatchError(BusinessRuleViolation):
    """Raised when a transaction is filed under a category of the other type."""

    def __init__(self, category_name: str, category_type: str, transaction_type: str):
        super().__init__(
            message=f"Category '{category_name}' is an {category_type} category "
            f"and cannot hold {transaction_type} transactions",
            code=ErrorCode.CATEGORY_TYPE_MISMATCH,
            details={
                "category_name": category_name,
                "category_type": category_type,
                "transaction_type": transaction_type,
            },
        )


class CategoryInUseError(BusinessRuleViolation):
    """Raised when deleting a category that transactions still reference."""

    def __init__(self, category_id: UUID, transaction_count: int) -> None:
        super().__init__(
            message=f"Category '{category_id}' is used by "
            f"{transaction_count} transaction(s)",
            code=ErrorCode.CATEGORY_IN_USE,
            details={
                "category_id": str(category_id),
                "transaction_count": transaction_count,
            },
        )
