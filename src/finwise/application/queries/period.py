"""Translate request-style period parameters into a DateRange."""

from __future__ import annotations

from datetime import date
from typing import Optional

from finwise.domain.shared import DateRange, InvalidParameterError


def resolve_period(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> Optional[DateRange]:
    """Build the inclusive range for explicit dates or a year (and month).

    Explicit dates win over ``year``/``month``. Returns None when no period
    was requested.
    """
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            missing = "start_date" if start_date is None else "end_date"
            raise InvalidParameterError(
                missing,
                None,
                "is required when filtering by date range",
            )
        return DateRange(start_date, end_date)

    if month is not None:
        if year is None:
            raise InvalidParameterError("year", None, "is required with month")
        return DateRange.for_month(year, month)

    if year is not None:
        return DateRange.for_year(year)

    return None
