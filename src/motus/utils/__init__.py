"""Utility helpers for motus."""

from .dates import days_between, format_date, parse_date, week_number_of, weeks_until

__all__ = [
    "days_between",
    "format_date",
    "parse_date",
    "week_number_of",
    "weeks_until",
]
