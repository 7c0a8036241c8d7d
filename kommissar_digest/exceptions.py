"""Exception hierarchy for the digest.

Events errors are terminal for a load; image errors are scoped to one event.
"""

from __future__ import annotations


class DigestError(Exception):
    """Base exception for all kommissar_digest errors."""


class EventsError(DigestError):
    """Loading the day's events failed as a whole."""


class FetchError(EventsError):
    """Network failure or non-2xx status from the events API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class InvalidResponseFormat(EventsError):
    """The events API answered with a payload lacking ``data.Events``."""


class NoRelevantEvents(EventsError):
    """No event cleared the relevance threshold and fallback was disabled."""


class ImageError(DigestError):
    """Producing the image for a single event failed."""


class ImageGenerationFailed(ImageError):
    """The image API refused the request or returned no artifact."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class ImageDecodeError(ImageError):
    """The returned artifact is not decodable image data."""


__all__ = [
    "DigestError",
    "EventsError",
    "FetchError",
    "InvalidResponseFormat",
    "NoRelevantEvents",
    "ImageError",
    "ImageGenerationFailed",
    "ImageDecodeError",
]
