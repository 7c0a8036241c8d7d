"""End-to-end digest pipeline: fetch, filter, then illustrate one event at a time."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..exceptions import ImageError
from ..models.image_state import EventCard, ImageStatus
from ..services.discovery import fetch_today_events
from ..services.imaging import generate_image

logger = logging.getLogger(__name__)

# Called with (index, card) after every state change of a card
UpdateCallback = Callable[[int, EventCard], None]


def load_digest(today: Optional[datetime] = None) -> List[EventCard]:
    """Fetch and filter today's events into idle cards.

    Events API failures propagate unchanged; they end the whole load.
    """
    events = fetch_today_events(today)
    return [EventCard(event=event) for event in events]


def _illustrate(cards: List[EventCard], index: int, on_update: Optional[UpdateCallback]) -> None:
    card = cards[index]
    card.start_loading()
    if on_update:
        on_update(index, card)

    try:
        image_url = generate_image(card.event.description, card.event.year)
    except ImageError as exc:
        logger.warning("Image generation failed for event %d (%d): %s", index, card.event.year, exc)
        card.fail(str(exc))
    except Exception as exc:
        logger.exception("Unexpected error generating image for event %d (%d)", index, card.event.year)
        card.fail(f"Failed to generate image: {exc}")
    else:
        card.finish(image_url)

    if on_update:
        on_update(index, card)


def generate_images(cards: List[EventCard], on_update: Optional[UpdateCallback] = None) -> None:
    """Illustrate every card in order, one request in flight at a time.

    A failed card is marked as such and the loop moves on to the next one.
    """
    for index in range(len(cards)):
        _illustrate(cards, index, on_update)


def retry_image(
    cards: List[EventCard], index: int, on_update: Optional[UpdateCallback] = None
) -> EventCard:
    """Regenerate the image of a single card from its ready or error state."""
    logger.info("Retrying image for event %d", index)
    _illustrate(cards, index, on_update)
    return cards[index]


def run(today: Optional[datetime] = None, on_update: Optional[UpdateCallback] = None) -> List[EventCard]:
    """Execute the full pipeline once and return the illustrated cards."""
    logger.info("Starting Kommissar's Digest workflow")

    # 1. Discover and filter events
    cards = load_digest(today)

    # 2. Illustrate them, most relevant first
    generate_images(cards, on_update)

    ready = sum(1 for card in cards if card.status is ImageStatus.READY)
    _log_stats(len(cards), ready, len(cards) - ready)
    return cards


def _log_stats(total_events: int, images: int, failures: int) -> None:
    logger.info("=== Kommissar's Digest Statistics ===")
    logger.info("Relevant events: %d", total_events)
    logger.info("Images generated: %d", images)
    logger.info("Image failures: %d", failures)
    logger.info("=====================================")

__all__ = ["run", "load_digest", "generate_images", "retry_image"]
