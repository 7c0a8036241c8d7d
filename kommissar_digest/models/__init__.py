"""Dataclasses shared across services and workflows."""

from .event import HistoricalEvent, RawEvent, ScoredEvent, parse_year  # noqa: F401
from .context import HistoricalContext, StabilityPrompt  # noqa: F401
from .image_state import (  # noqa: F401
    EventCard,
    ImageFailed,
    ImageIdle,
    ImageLoading,
    ImageReady,
    ImageState,
    ImageStatus,
)

__all__ = [
    "RawEvent",
    "ScoredEvent",
    "HistoricalEvent",
    "parse_year",
    "HistoricalContext",
    "StabilityPrompt",
    "EventCard",
    "ImageState",
    "ImageStatus",
    "ImageIdle",
    "ImageLoading",
    "ImageReady",
    "ImageFailed",
]
