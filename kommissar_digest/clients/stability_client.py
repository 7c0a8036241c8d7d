"""Shared HTTP session for the Stability text-to-image API."""

from __future__ import annotations

import requests

_session: requests.Session | None = None


def get_stability_session() -> requests.Session:
    """Return a singleton :class:`requests.Session` for image generation.

    The bearer token is attached per request so a key loaded after the
    session was created is still honoured.
    """
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update(
            {"Accept": "application/json", "Content-Type": "application/json"}
        )
    return _session

__all__ = ["get_stability_session"]
