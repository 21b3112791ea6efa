"""Time utilities for the domain layer."""

from datetime import date, datetime, timezone

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def utc_now() -> datetime:
    """Return current UTC datetime (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def today_utc() -> date:
    """Return current date in UTC."""
    return datetime.now(tz=timezone.utc).date()


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``delta`` calendar months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_key(year: int, month: int) -> str:
    """Format a (year, month) pair as ``YYYY-MM``."""
    return f"{year:04d}-{month:02d}"


def month_label(year: int, month: int) -> str:
    """Format a (year, month) pair as ``Jan 2025``."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"
