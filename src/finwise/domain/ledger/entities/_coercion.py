"""Field coercion shared by the ledger records.

Records accept raw storage values (strings for decimals, dates and enums)
and normalize them in ``__post_init__``.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, TypeVar
from uuid import UUID

from finwise.domain.shared.exceptions import ErrorCode, ParseError, ValidationError

E = TypeVar("E", bound=Enum)


def coerce_enum(enum_cls: type[E], value: Any, field: str, record_id: Any) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise ValidationError(
            f"Invalid {field} {value!r} on record '{record_id}' "
            f"(expected one of: {allowed})",
            ErrorCode.VALIDATION_ERROR,
            details={"field": field, "value": repr(value), "record_id": str(record_id)},
        ) from e


def coerce_date(value: Any, field: str, record_id: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError as e:
            raise ParseError(field, value, record_id, "expected YYYY-MM-DD") from e
    raise ParseError(field, value, record_id, "expected a date")


def coerce_optional_date(value: Any, field: str, record_id: Any) -> date | None:
    if value is None or value == "":
        return None
    return coerce_date(value, field, record_id)


def coerce_uuid(value: Any, field: str, record_id: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise ParseError(field, value, record_id, "expected a UUID") from e


def require_text(value: Any, field: str, record_id: Any) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise ValidationError(
            f"'{field}' cannot be empty on record '{record_id}'",
            details={"field": field, "record_id": str(record_id)},
        )
    return text
