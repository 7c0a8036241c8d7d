"""Shared HTTP session for the "on this day" events API."""

from __future__ import annotations

import requests

_session: requests.Session | None = None


def get_history_session() -> requests.Session:
    """Return a singleton :class:`requests.Session` for the events API."""
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({"Accept": "application/json"})
    return _session

__all__ = ["get_history_session"]
