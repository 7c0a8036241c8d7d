"""Prompt-side value objects: the derived historical context and the prompt pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class HistoricalContext:
    """Stylistic attributes inferred from an event description and its year."""

    era: str
    style: str
    atmosphere: str
    location: str
    subjects: Tuple[str, ...] = ()
    technical_details: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class StabilityPrompt:
    """Positive and negative prompt sent together to the image API."""

    prompt: str
    negative_prompt: str


__all__ = ["HistoricalContext", "StabilityPrompt"]
