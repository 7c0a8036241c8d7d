"""Event discovery via the "on this day" history API."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from ..clients.history_client import get_history_session
from ..config import HISTORY_API_BASE_URL, REQUEST_TIMEOUT
from ..exceptions import FetchError, InvalidResponseFormat
from ..models.event import HistoricalEvent, RawEvent
from ..utils.datetime_utils import get_current_timestamp
from .filtering import filter_events

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Local helpers
# ---------------------------------------------------------------------------

def _extract_events(payload: Any) -> List[Any]:
    """Return the ``data.Events`` array or raise :class:`InvalidResponseFormat`."""
    data = payload.get("data") if isinstance(payload, dict) else None
    events = data.get("Events") if isinstance(data, dict) else None
    if not isinstance(events, list):
        logger.error("Invalid response format from history API: %.500s", payload)
        raise InvalidResponseFormat("Invalid response format from history API")
    return events


def _to_raw_events(items: List[Any], default_date: str) -> List[RawEvent]:
    raw_events: List[RawEvent] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning("Skipping event #%d: not an object", index)
            continue
        try:
            raw_events.append(RawEvent.from_payload(item, default_date=default_date))
        except ValueError as exc:
            logger.warning("Skipping event #%d: %s", index, exc)
    return raw_events


def fetch_raw_events(today: Optional[datetime] = None) -> List[RawEvent]:
    """Download and validate the events recorded for *today*'s month and day."""
    today = today or get_current_timestamp()
    url = f"{HISTORY_API_BASE_URL}/{today.month}/{today.day}"
    logger.info("Fetching events for date: %d/%d", today.month, today.day)

    try:
        response = get_history_session().get(url, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        logger.error("History API request failed: %s", exc)
        raise FetchError(f"History API request failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        logger.error("Error from history API: %s - %.500s", response.status_code, response.text)
        raise FetchError(
            f"History API error: {response.status_code}", status_code=response.status_code
        )

    try:
        payload: Dict[str, Any] = response.json()
    except ValueError as exc:
        logger.error("History API returned a non-JSON body")
        raise InvalidResponseFormat("History API returned a non-JSON body") from exc

    items = _extract_events(payload)
    raw_events = _to_raw_events(items, default_date=str(payload.get("date") or ""))
    logger.info("Successfully fetched %d events from API", len(raw_events))
    return raw_events


def fetch_today_events(today: Optional[datetime] = None) -> List[HistoricalEvent]:
    """Fetch the day's events and return the relevant ones, best first."""
    raw_events = fetch_raw_events(today)
    return filter_events(raw_events, today=today)

__all__ = ["fetch_today_events", "fetch_raw_events"]
