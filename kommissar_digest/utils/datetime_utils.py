"""Utility functions for working with dates and times."""

from datetime import datetime, timezone

__all__ = [
    "get_current_timestamp",
    "format_month_day",
]


def get_current_timestamp() -> datetime:
    """Return the current UTC datetime.

    Both the events API path and the fallback events are keyed on this
    value's month and day.
    """
    return datetime.now(tz=timezone.utc)


def format_month_day(moment: datetime) -> str:
    """Format *moment* like the events API dates, e.g. ``"October 19"``."""
    return f"{moment:%B} {moment.day}"
