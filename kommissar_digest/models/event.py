"""Event dataclasses passed between the fetch boundary, the filter and callers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SHARE_SIGNATURE: str = "Shared from Kommissar's Digest"

_LEADING_INT = re.compile(r"-?\d+")
_BC_SUFFIX = re.compile(r"\bB\.?C(?:\.?E)?\b", re.IGNORECASE)


def parse_year(value: Any) -> int:
    """Return the integer year held in *value*.

    The events API sends years as strings, mostly plain (``"1917"``) but
    occasionally decorated (``"44 BC"``). BC years become negative.

    Raises
    ------
    ValueError
        If *value* contains no digits.
    """
    if isinstance(value, int):
        return value
    text = str(value).strip()
    match = _LEADING_INT.search(text)
    if match is None:
        raise ValueError(f"Cannot parse year from {value!r}")
    year = int(match.group(0))
    if _BC_SUFFIX.search(text):
        year = -abs(year)
    return year


@dataclass(frozen=True, slots=True)
class RawEvent:
    """One entry of the events API payload, validated at the fetch boundary."""

    date: str
    text: str
    year: str

    @classmethod
    def from_payload(cls, item: Dict[str, Any], default_date: str = "") -> "RawEvent":
        """Build from an untyped API entry.

        Individual entries usually lack ``date``; the payload-level date is
        used in that case.
        """
        text = item.get("text")
        year = item.get("year")
        if not isinstance(text, str) or not text.strip():
            raise ValueError("event entry has no text")
        if year is None or str(year).strip() == "":
            raise ValueError("event entry has no year")
        parse_year(year)
        return cls(date=str(item.get("date") or default_date), text=text, year=str(year))


@dataclass(frozen=True, slots=True)
class ScoredEvent:
    """A raw event together with its relevance score and match trace."""

    raw_event: RawEvent
    score: float
    match_trace: List[str] = field(default_factory=list)


@dataclass(slots=True)
class HistoricalEvent:
    """A relevant historical event, ready to be illustrated and displayed."""

    date: str
    description: str
    year: int
    image_url: Optional[str] = None

    @classmethod
    def from_raw(cls, raw: RawEvent) -> "HistoricalEvent":
        return cls(date=raw.date, description=raw.text, year=parse_year(raw.year))

    def share_text(self) -> str:
        """Return the text used when the event is shared."""
        return f"{self.year}: {self.description}\n\n{SHARE_SIGNATURE}"


__all__ = ["RawEvent", "ScoredEvent", "HistoricalEvent", "parse_year", "SHARE_SIGNATURE"]
