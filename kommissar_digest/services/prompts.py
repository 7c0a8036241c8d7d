"""Assembly of the positive/negative prompt pair for the image API."""

from __future__ import annotations

from typing import Tuple

from ..models.context import StabilityPrompt
from .context import classify

SENTENCE_SEPARATOR: str = ". "
LIST_SEPARATOR: str = ", "

# Sent unchanged for every era, colour exclusion included
NEGATIVE_TERMS: Tuple[str, ...] = (
    "no anachronistic elements",
    "no modern technology or clothing",
    "no artificial poses",
    "no digital artifacts",
    "no watermarks",
    "no text overlays",
    "no color in pre-color photography eras",
    "historically accurate",
)
NEGATIVE_PROMPT: str = LIST_SEPARATOR.join(NEGATIVE_TERMS)


def synthesize(description: str, year: int) -> StabilityPrompt:
    """Build the deterministic prompt pair for *description* in *year*."""
    context = classify(description, year)
    prompt = SENTENCE_SEPARATOR.join(
        [
            f"{context.era} depicting {description}",
            f"Style: {context.style}",
            f"Setting: {context.location}",
            f"Featuring: {LIST_SEPARATOR.join(context.subjects)}",
            f"Atmosphere: {context.atmosphere}",
            f"Technical requirements: {LIST_SEPARATOR.join(context.technical_details)}",
        ]
    )
    return StabilityPrompt(prompt=prompt, negative_prompt=NEGATIVE_PROMPT)


__all__ = ["synthesize", "NEGATIVE_PROMPT", "NEGATIVE_TERMS"]
