"""Inclusive calendar date range."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date

from finwise.domain.shared.exceptions import InvalidParameterError


@dataclass(frozen=True)
class DateRange:
    """Closed interval of dates: both ``start`` and ``end`` are included."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidParameterError(
                "start",
                self.start.isoformat(),
                f"must not be after end ({self.end.isoformat()})",
            )

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @classmethod
    def for_month(cls, year: int, month: int) -> DateRange:
        if not 1 <= month <= 12:  # NOQA: PLR2004
            raise InvalidParameterError("month", month, "must be between 1 and 12")
        last_day = calendar.monthrange(year, month)[1]
        return cls(date(year, month, 1), date(year, month, last_day))

    @classmethod
    def for_year(cls, year: int) -> DateRange:
        return cls(date(year, 1, 1), date(year, 12, 31))
