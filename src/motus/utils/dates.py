"""Date helpers shared by models and the engine."""

import math
from datetime import date, datetime


def parse_date(value: date | str | None) -> date | None:
    """Parse an ISO date string (or pass a date through).

    Accepts ``YYYY-MM-DD`` as well as full ISO timestamps, keeping only the date.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if "T" in text:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    return date.fromisoformat(text)


def format_date(value: date | None) -> str | None:
    """Format a date as ISO string for JSON."""
    return value.isoformat() if value else None


def days_between(start: date, end: date) -> int:
    """Calendar days from start to end (negative when end is earlier)."""
    return (end - start).days


def weeks_until(start: date, end: date) -> int:
    """Whole weeks needed to reach ``end`` from ``start``, never less than 1."""
    return max(1, math.ceil(days_between(start, end) / 7))


def week_number_of(start: date, day: date) -> int:
    """1-indexed program week that contains ``day`` (0 or less if before start)."""
    return days_between(start, day) // 7 + 1
