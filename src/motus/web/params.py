"""Shared request parsing."""

from datetime import date

from ..errors import InvalidInputError
from ..utils.dates import parse_date


def start_date_from(payload: dict) -> date:
    """Optional ``start_date`` field, defaulting to today."""
    value = payload.get("start_date")
    try:
        return parse_date(value) or date.today()
    except (ValueError, TypeError) as e:
        raise InvalidInputError(f"Invalid start_date: {value!r} (expected YYYY-MM-DD)",
                                field="start_date") from e
