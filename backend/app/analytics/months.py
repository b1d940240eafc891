# backend/app/analytics/months.py
"""Calendar-month helpers built around ``YYYY-MM`` month keys."""
import calendar
import re
from datetime import date, datetime
from typing import Tuple, Union

MONTH_KEY_RE = re.compile(r"[0-9]{4}-[0-9]{2}")


def month_key(value: Union[date, datetime, str]) -> str:
    """Return the ``YYYY-MM`` key of a date (or an ISO date string)."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return f"{value.year}-{value.month:02d}"


def parse_month(key: str) -> Tuple[int, int]:
    """Split a month key into ``(year, month)``; raises ValueError when malformed."""
    if not isinstance(key, str) or not MONTH_KEY_RE.fullmatch(key):
        raise ValueError(f"Month must be in YYYY-MM format, got {key!r}")
    year, month = (int(part) for part in key.split("-"))
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range in {key!r}")
    return year, month


def previous_month(key: str) -> str:
    year, month = parse_month(key)
    if month == 1:
        return f"{year - 1}-12"
    return f"{year}-{month - 1:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def days_elapsed(year: int, month: int, today: date) -> int:
    """Days of the target month that have passed as of ``today``.

    The current month reports today's day-of-month, a month entirely in the
    past reports its full length and a month in the future reports 0.
    """
    if (today.year, today.month) == (year, month):
        return today.day
    if (today.year, today.month) > (year, month):
        return days_in_month(year, month)
    return 0
