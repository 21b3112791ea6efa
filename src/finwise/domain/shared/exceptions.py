"""Error codes and the base exception hierarchy of the domain layer.

The presentation layer maps ``ErrorCode`` values to HTTP statuses, so every
error raised by domain or application code derives from ``DomainException``.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to API clients.

    Clients match on these values; renaming one is a breaking change.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_DATE = "INVALID_DATE"
    INVALID_STATUS = "INVALID_STATUS"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND"
    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    GOAL_NOT_FOUND = "GOAL_NOT_FOUND"
    INVESTMENT_NOT_FOUND = "INVESTMENT_NOT_FOUND"
    ALERT_NOT_FOUND = "ALERT_NOT_FOUND"

    # 422
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CATEGORY_TYPE_MISMATCH = "CATEGORY_TYPE_MISMATCH"
    CATEGORY_IN_USE = "CATEGORY_IN_USE"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Root of all domain errors.

    Attributes
    ----------
    message
        Text shown to the API client.
    code
        ``ErrorCode`` for programmatic handling; each subclass supplies a
        ``default_code`` used when none is passed.
    details
        Extra context for the logs. Never sent to clients.
    """

    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message!r})"


class ValidationError(DomainException):
    """Input is malformed or out of range."""

    default_code = ErrorCode.VALIDATION_ERROR


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class BusinessRuleViolation(DomainException):
    """Input is well-formed but breaks a ledger rule."""

    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class ParseError(ValidationError):
    """A numeric or date value could not be parsed.

    ``record_id`` is set when the value came from a stored record, so a
    corrupt row can be traced from the error message alone.
    """

    def __init__(
        self,
        field: str,
        value: Any,
        record_id: Any = None,
        reason: str | None = None,
    ) -> None:
        message = f"Invalid value {value!r} for '{field}'"
        if record_id is not None:
            message += f" on record '{record_id}'"
        if reason:
            message += f": {reason}"
        super().__init__(
            message,
            ErrorCode.PARSE_ERROR,
            details={
                "field": field,
                "value": repr(value),
                "record_id": None if record_id is None else str(record_id),
            },
        )
        self.field = field
        self.value = value
        self.record_id = record_id


class InvalidParameterError(ValidationError):
    """A calculation input parsed fine but is outside its allowed range."""

    def __init__(self, parameter: str, value: Any, requirement: str) -> None:
        super().__init__(
            f"Parameter '{parameter}' {requirement} (got {value})",
            ErrorCode.INVALID_PARAMETER,
            details={"parameter": parameter, "value": str(value)},
        )
        self.parameter = parameter
        self.value = value
