"""Per-event image state.

Each state is its own frozen dataclass so that a card can never be loading
and holding an image at the same time. :class:`EventCard` owns the legal
transitions::

    idle -> loading -> ready | error
    ready | error -> loading          (user-triggered retry)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from .event import HistoricalEvent


class ImageStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ImageIdle:
    status: ClassVar[ImageStatus] = ImageStatus.IDLE


@dataclass(frozen=True, slots=True)
class ImageLoading:
    status: ClassVar[ImageStatus] = ImageStatus.LOADING


@dataclass(frozen=True, slots=True)
class ImageReady:
    image_url: str
    status: ClassVar[ImageStatus] = ImageStatus.READY


@dataclass(frozen=True, slots=True)
class ImageFailed:
    message: str
    status: ClassVar[ImageStatus] = ImageStatus.ERROR


ImageState = Union[ImageIdle, ImageLoading, ImageReady, ImageFailed]


@dataclass(slots=True)
class EventCard:
    """A historical event paired with the state of its illustration."""

    event: HistoricalEvent
    state: ImageState = field(default_factory=ImageIdle)

    @property
    def status(self) -> ImageStatus:
        return self.state.status

    def start_loading(self) -> None:
        if isinstance(self.state, ImageLoading):
            raise RuntimeError(
                f"Image for {self.event.year} event is already being generated"
            )
        self.state = ImageLoading()
        self.event.image_url = None

    def finish(self, image_url: str) -> None:
        self._require_loading()
        self.state = ImageReady(image_url)
        self.event.image_url = image_url

    def fail(self, message: str) -> None:
        self._require_loading()
        self.state = ImageFailed(message)

    def _require_loading(self) -> None:
        if not isinstance(self.state, ImageLoading):
            raise RuntimeError(
                f"Cannot resolve image from state '{self.state.status.value}'"
            )


__all__ = [
    "ImageStatus",
    "ImageIdle",
    "ImageLoading",
    "ImageReady",
    "ImageFailed",
    "ImageState",
    "EventCard",
]
