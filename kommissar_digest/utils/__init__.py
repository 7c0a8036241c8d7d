"""Utility functions for the digest.

Re-exports the datetime helpers so that imports like
`from ..utils import get_current_timestamp` work as expected.
"""

from .datetime_utils import get_current_timestamp, format_month_day  # noqa: F401

__all__ = [
    "get_current_timestamp",
    "format_month_day",
]
