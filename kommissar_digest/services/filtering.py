"""Relevance filtering of raw events into canonical historical events."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from ..exceptions import NoRelevantEvents
from ..models.event import HistoricalEvent, RawEvent, ScoredEvent
from ..utils.datetime_utils import format_month_day, get_current_timestamp
from .relevance import score_text

# ---------------------------------------------------------------------------
# Local filter settings
# ---------------------------------------------------------------------------
RELEVANCE_THRESHOLD: float = 2.0

# (year, description) shown when nothing on the day clears the threshold
FALLBACK_EVENTS: Tuple[Tuple[int, str], ...] = (
    (
        1917,
        "The Bolsheviks storm the Winter Palace in Petrograd, "
        "beginning the October Revolution.",
    ),
    (
        1949,
        "Mao Zedong proclaims the founding of the People's Republic of China "
        "in Beijing.",
    ),
    (
        1989,
        "Crowds gather at the Berlin Wall as the Eastern Bloc begins to unravel.",
    ),
)

logger = logging.getLogger(__name__)


def score_events(raw_events: Iterable[RawEvent]) -> List[ScoredEvent]:
    """Score every event, keeping input order."""
    scored: List[ScoredEvent] = []
    for raw in raw_events:
        result = score_text(raw.text)
        logger.debug(
            "Scored %s event %.1f: %s", raw.year, result.score, "; ".join(result.trace) or "-"
        )
        scored.append(ScoredEvent(raw_event=raw, score=result.score, match_trace=list(result.trace)))
    return scored


def fallback_events(today: Optional[datetime] = None) -> List[HistoricalEvent]:
    """Return the fixed placeholder events, dated to *today*'s month and day."""
    date = format_month_day(today or get_current_timestamp())
    return [
        HistoricalEvent(date=date, description=description, year=year)
        for year, description in FALLBACK_EVENTS
    ]


def filter_events(
    raw_events: Iterable[RawEvent],
    *,
    threshold: float = RELEVANCE_THRESHOLD,
    use_fallback: bool = True,
    today: Optional[datetime] = None,
) -> List[HistoricalEvent]:
    """Keep relevant events, most relevant first.

    Events scoring at least *threshold* are kept and sorted by descending
    score; ties keep their input order. When nothing is kept the fallback
    events are returned, or :class:`NoRelevantEvents` is raised if
    *use_fallback* is false.
    """
    scored = score_events(raw_events)
    retained = [item for item in scored if item.score >= threshold]
    retained.sort(key=lambda item: item.score, reverse=True)

    logger.info("Kept %d of %d events (threshold %.1f)", len(retained), len(scored), threshold)

    if not retained:
        if not use_fallback:
            raise NoRelevantEvents(f"No event scored {threshold} or more")
        logger.info("No relevant events today – using fallback events")
        return fallback_events(today)

    return [HistoricalEvent.from_raw(item.raw_event) for item in retained]


__all__ = ["filter_events", "score_events", "fallback_events", "RELEVANCE_THRESHOLD"]
