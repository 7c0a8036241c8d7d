"""Weighted-keyword relevance scoring for event descriptions.

Every term is tested as a whole word first (full category weight) and as a
plain substring otherwise (half weight). Locations only count once some other
category has matched, so geography alone never makes an event relevant. A few
co-occurrence rules then adjust the total:

* two or more of worker/peasant/insurgent: +2
* "congress" next to any of them: +1
* "war" with nothing else relevant: -2, floored at zero
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Final, List, Mapping, Pattern, Tuple

from .taxonomy import KEYWORD_TAXONOMY, LOCATIONS_CATEGORY, CategoryDefinition

# ---------------------------------------------------------------------------
# Bonus / penalty rules
# ---------------------------------------------------------------------------
COMBINED_TERMS_BONUS: Final[float] = 2.0
CONGRESS_BONUS: Final[float] = 1.0
WAR_WITHOUT_CONTEXT_PENALTY: Final[float] = 2.0

_GROUP_PROBES: Final[Tuple[Pattern[str], ...]] = (
    re.compile(r"\bworkers?\b"),
    re.compile(r"\bpeasants?\b"),
    re.compile(r"\binsurgents?\b"),
)
_CONGRESS_PROBE: Final[Pattern[str]] = re.compile(r"\bcongress\b")
_WAR_PROBE: Final[Pattern[str]] = re.compile(r"\bwar\b")


class MatchKind(str, Enum):
    NONE = "none"
    PARTIAL = "partial"
    EXACT = "exact"


@dataclass(frozen=True, slots=True)
class RelevanceResult:
    """Total score for one text plus the ordered list of rules that fired."""

    score: float
    trace: Tuple[str, ...]


@lru_cache(maxsize=None)
def _word_pattern(term: str) -> Pattern[str]:
    return re.compile(rf"\b{re.escape(term)}\b")


def match_term(text: str, term: str) -> MatchKind:
    """Classify how *term* occurs in the already-lowercased *text*."""
    if _word_pattern(term).search(text):
        return MatchKind.EXACT
    if term in text:
        return MatchKind.PARTIAL
    return MatchKind.NONE


def _score_category(text: str, category: CategoryDefinition, trace: List[str]) -> float:
    total = 0.0
    for term in category.terms:
        kind = match_term(text, term)
        if kind is MatchKind.NONE:
            continue
        points = category.weight if kind is MatchKind.EXACT else category.weight / 2
        total += points
        trace.append(f"{category.name}: '{term}' ({kind.value}, +{points:g})")
    return total


def score_text(
    text: str,
    taxonomy: Mapping[str, CategoryDefinition] = KEYWORD_TAXONOMY,
) -> RelevanceResult:
    """Score *text* against *taxonomy*.

    Parameters
    ----------
    text
        Event description, any case.
    taxonomy
        Category table; defaults to :data:`KEYWORD_TAXONOMY`.

    Returns
    -------
    RelevanceResult
        Non-negative score (halves possible) and the trace of every
        contribution in the order it was applied.
    """
    normalized = text.lower()
    trace: List[str] = []
    score = 0.0
    has_non_location_match = False

    for name, category in taxonomy.items():
        if name == LOCATIONS_CATEGORY:
            continue
        contribution = _score_category(normalized, category, trace)
        if contribution > 0:
            has_non_location_match = True
        score += contribution

    locations = taxonomy.get(LOCATIONS_CATEGORY)
    if has_non_location_match and locations is not None:
        score += _score_category(normalized, locations, trace)

    group_hits = sum(1 for probe in _GROUP_PROBES if probe.search(normalized))
    if group_hits >= 2:
        score += COMBINED_TERMS_BONUS
        trace.append("combined terms bonus")
    if group_hits >= 1 and _CONGRESS_PROBE.search(normalized):
        score += CONGRESS_BONUS
        trace.append("congress bonus")
    if _WAR_PROBE.search(normalized) and not has_non_location_match:
        score = max(0.0, score - WAR_WITHOUT_CONTEXT_PENALTY)
        trace.append("war without context penalty")

    return RelevanceResult(score=score, trace=tuple(trace))


__all__ = [
    "MatchKind",
    "RelevanceResult",
    "match_term",
    "score_text",
    "COMBINED_TERMS_BONUS",
    "CONGRESS_BONUS",
    "WAR_WITHOUT_CONTEXT_PENALTY",
]
