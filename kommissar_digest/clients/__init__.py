"""Convenience re-exports for singleton HTTP session accessors."""

from .history_client import get_history_session  # noqa: F401
from .stability_client import get_stability_session  # noqa: F401

__all__ = [
    "get_history_session",
    "get_stability_session",
]
