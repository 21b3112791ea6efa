"""Strict numeric parsing and rounding helpers.

Values coming from storage or HTTP bodies may be strings, ints, floats or
Decimals. Anything that does not parse as a finite number raises
ParseError; nothing is ever coerced to zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

from finwise.domain.shared.exceptions import ParseError

CENTS = Decimal("0.01")
ZERO = Decimal("0")

# Money cannot carry more precision than cents
MONEY_EXPONENT_LIMIT = -2


def parse_decimal(value: Any, field: str, record_id: Any = None) -> Decimal:
    """Parse ``value`` into a finite Decimal or raise ParseError."""
    if isinstance(value, bool) or value is None:
        raise ParseError(field, value, record_id, "expected a number")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ParseError(field, value, record_id, "expected a number")
        try:
            result = Decimal(text)
        except InvalidOperation as e:
            raise ParseError(field, value, record_id, "not a number") from e
    else:
        raise ParseError(
            field,
            value,
            record_id,
            f"unsupported type {type(value).__name__}",
        )

    if not result.is_finite():
        raise ParseError(field, value, record_id, "must be finite")
    return result


def parse_money(value: Any, field: str, record_id: Any = None) -> Decimal:
    """Parse a monetary amount (at most two decimal places)."""
    result = parse_decimal(value, field, record_id)
    exponent = result.as_tuple().exponent
    if isinstance(exponent, int) and exponent < MONEY_EXPONENT_LIMIT:
        # Trailing zeros beyond cents are harmless ("10.500")
        normalized = result.normalize()
        exponent = normalized.as_tuple().exponent
        if isinstance(exponent, int) and exponent < MONEY_EXPONENT_LIMIT:
            raise ParseError(
                field,
                value,
                record_id,
                "cannot have more than 2 decimal places",
            )
        result = normalized.quantize(CENTS)
    return result


def parse_int(value: Any, field: str, record_id: Any = None) -> int:
    """Parse an integral value; "3", 3 and Decimal("3.0") are accepted."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    result = parse_decimal(value, field, record_id)
    if result != result.to_integral_value():
        raise ParseError(field, value, record_id, "expected a whole number")
    return int(result)


def round_money(value: Decimal) -> Decimal:
    """Round half-up to cents. Only used when emitting results.

    Precision is widened to fit ``value``, so large balances keep their
    integer part instead of failing to quantize.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)
