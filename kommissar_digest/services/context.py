"""Rule-based inference of visual context from an event description.

Matching here is plain case-insensitive substring containment, looser than
the relevance scorer: this stage only shapes the picture, it never decides
whether an event is shown.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..models.context import HistoricalContext

# (exclusive upper bound, era, style); the last bucket has no upper bound
ERA_BUCKETS: Tuple[Tuple[Optional[int], str, str], ...] = (
    (1839, "pre-photography era", "oil painting, historical artwork, detailed illustration"),
    (1880, "early photography", "daguerreotype, sepia toned, vintage photograph"),
    (1900, "Victorian era photography", "black and white photograph, cabinet card style, formal composition"),
    (1930, "early 20th century", "vintage photograph, silver gelatin print style"),
    (1950, "interwar and wartime era", "documentary photography, press photo style"),
    (1970, "mid-20th century", "journalistic photography, film grain, high contrast"),
    (1990, "late 20th century", "photojournalism, 35mm film look"),
    (None, "modern era", "digital photography, high resolution"),
)

# Checked in this order; the first hit wins
LOCATION_KEYWORDS: Tuple[str, ...] = (
    "palace",
    "battlefield",
    "city",
    "street",
    "parliament",
    "square",
    "factory",
    "rural",
    "urban",
    "industrial",
    "government building",
    "protest site",
)
DEFAULT_LOCATION: str = "historical setting"

# (triggers, subject phrases); every matching group is appended
SUBJECT_RULES: Tuple[Tuple[Tuple[str, ...], Tuple[str, ...]], ...] = (
    (("war", "battle"), ("soldiers", "military equipment", "battlefield scenes")),
    (("protest", "revolution"), ("protesters", "crowds", "banners", "revolutionary symbols")),
    (("leader", "minister"), ("political figures", "officials", "formal attire")),
    (("worker", "labor"), ("workers", "industrial equipment", "factory settings")),
)
DEFAULT_SUBJECTS: Tuple[str, ...] = ("historical figures", "period-appropriate clothing")

# (triggers, atmosphere); only the first matching rule applies
ATMOSPHERE_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("victory", "celebration"), "triumphant, energetic"),
    (("defeat", "death"), "somber, dramatic"),
    (("protest", "uprising"), "tense, dramatic, revolutionary"),
    (("meeting", "conference"), "formal, serious, diplomatic"),
)
DEFAULT_ATMOSPHERE: str = "historical, documentary"

TECHNICAL_DETAILS: Tuple[str, ...] = (
    "highly detailed",
    "sharp focus",
    "historical accuracy",
    "period-appropriate lighting",
    "authentic details",
    "masterful composition",
)


def era_for_year(year: int) -> Tuple[str, str]:
    """Return ``(era, style)`` for *year*."""
    for upper, era, style in ERA_BUCKETS:
        if upper is None or year < upper:
            return era, style
    raise AssertionError("ERA_BUCKETS must end with an unbounded bucket")


def _contains_any(text: str, triggers: Tuple[str, ...]) -> bool:
    return any(trigger in text for trigger in triggers)


def find_location(text: str) -> str:
    lowered = text.lower()
    for keyword in LOCATION_KEYWORDS:
        if keyword in lowered:
            return keyword
    return DEFAULT_LOCATION


def find_subjects(text: str) -> List[str]:
    lowered = text.lower()
    subjects: List[str] = []
    for triggers, phrases in SUBJECT_RULES:
        if _contains_any(lowered, triggers):
            subjects.extend(phrases)
    return subjects or list(DEFAULT_SUBJECTS)


def find_atmosphere(text: str) -> str:
    lowered = text.lower()
    for triggers, atmosphere in ATMOSPHERE_RULES:
        if _contains_any(lowered, triggers):
            return atmosphere
    return DEFAULT_ATMOSPHERE


def classify(description: str, year: int) -> HistoricalContext:
    """Infer era, style, setting, subjects and mood for an event."""
    era, style = era_for_year(year)
    return HistoricalContext(
        era=era,
        style=style,
        atmosphere=find_atmosphere(description),
        location=find_location(description),
        subjects=tuple(find_subjects(description)),
        technical_details=TECHNICAL_DETAILS,
    )


__all__ = [
    "classify",
    "era_for_year",
    "find_location",
    "find_subjects",
    "find_atmosphere",
    "ERA_BUCKETS",
    "LOCATION_KEYWORDS",
    "TECHNICAL_DETAILS",
]
