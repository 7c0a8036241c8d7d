"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from kommissar_digest.services import score_text` without having to
know which underlying module provides the symbol.
"""

from .taxonomy import KEYWORD_TAXONOMY, CategoryDefinition  # noqa: F401
from .relevance import score_text, match_term  # noqa: F401
from .filtering import filter_events, fallback_events  # noqa: F401
from .context import classify  # noqa: F401
from .prompts import synthesize  # noqa: F401
from .discovery import fetch_today_events, fetch_raw_events  # noqa: F401
from .imaging import generate_image  # noqa: F401

__all__ = [
    "KEYWORD_TAXONOMY",
    "CategoryDefinition",
    "score_text",
    "match_term",
    "filter_events",
    "fallback_events",
    "classify",
    "synthesize",
    "fetch_today_events",
    "fetch_raw_events",
    "generate_image",
]
