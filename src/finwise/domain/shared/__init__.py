"""Shared domain components.

This module exports shared value objects, exceptions, and helpers
used across domain boundaries.
"""

from finwise.domain.shared.date_range import DateRange
from finwise.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InvalidParameterError,
    ParseError,
    ValidationError,
)
from finwise.domain.shared.numbers import (
    parse_decimal,
    parse_int,
    parse_money,
    round_money,
)
from finwise.domain.shared.time import today_utc, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "ParseError",
    "InvalidParameterError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    # Value objects
    "DateRange",
    # Utilities
    "parse_decimal",
    "parse_int",
    "parse_money",
    "round_money",
    "today_utc",
    "utc_now",
]
