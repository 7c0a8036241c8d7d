"""Image generation via the Stability text-to-image API."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any, Dict, Optional

import requests

from ..clients.stability_client import get_stability_session
from ..config import IMAGE_REQUEST_TIMEOUT, STABILITY_API_BASE_URL, STABILITY_API_KEY
from ..exceptions import ImageDecodeError, ImageGenerationFailed
from ..models.context import StabilityPrompt
from .prompts import synthesize

# ---------------------------------------------------------------------------
# Local generation settings
# ---------------------------------------------------------------------------
CFG_SCALE: int = 7
IMAGE_HEIGHT: int = 1024
IMAGE_WIDTH: int = 1024
STEPS: int = 30
SAMPLES: int = 1

DATA_URI_PREFIX: str = "data:image/png;base64,"

logger = logging.getLogger(__name__)


def build_request_body(prompt: StabilityPrompt) -> Dict[str, Any]:
    """Return the JSON body for one text-to-image call."""
    return {
        "text_prompts": [
            {"text": prompt.prompt, "weight": 1},
            {"text": prompt.negative_prompt, "weight": -1},
        ],
        "cfg_scale": CFG_SCALE,
        "height": IMAGE_HEIGHT,
        "width": IMAGE_WIDTH,
        "steps": STEPS,
        "samples": SAMPLES,
    }


def _upstream_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


def to_data_uri(artifact: str) -> str:
    """Validate a base64 PNG artifact and wrap it in a data URI."""
    try:
        decoded = base64.b64decode(artifact, validate=True)
    except (binascii.Error, TypeError, ValueError) as exc:
        raise ImageDecodeError(f"Image data is not valid base64: {exc}") from exc
    if not decoded:
        raise ImageDecodeError("Image data is empty")
    return f"{DATA_URI_PREFIX}{artifact}"


def generate_image(description: str, year: int) -> str:
    """Generate an illustration for an event and return it as a data URI.

    Raises
    ------
    ImageGenerationFailed
        Missing credential, network failure, non-2xx response or no artifact.
    ImageDecodeError
        The artifact is not decodable.
    """
    if not STABILITY_API_KEY:
        raise ImageGenerationFailed("STABILITY_API_KEY is not set in environment variables")

    prompt = synthesize(description, year)
    logger.info("Generating image for %d event: %.80s", year, description)
    logger.debug("Prompt: %s | Negative: %s", prompt.prompt, prompt.negative_prompt)

    try:
        response = get_stability_session().post(
            f"{STABILITY_API_BASE_URL}/text-to-image",
            headers={"Authorization": f"Bearer {STABILITY_API_KEY}"},
            json=build_request_body(prompt),
            timeout=IMAGE_REQUEST_TIMEOUT,
        )
    except requests.RequestException as exc:
        logger.error("Stability API request failed: %s", exc)
        raise ImageGenerationFailed(f"Failed to generate image: {exc}") from exc

    if not 200 <= response.status_code < 300:
        message = _upstream_message(response) or "Unknown error"
        logger.error("Stability API error: %s - %s", response.status_code, message)
        raise ImageGenerationFailed(
            f"Failed to generate image: {message}", status_code=response.status_code
        )

    try:
        result = response.json()
    except ValueError as exc:
        raise ImageGenerationFailed("Stability API returned a non-JSON body") from exc

    artifacts = result.get("artifacts") if isinstance(result, dict) else None
    first = artifacts[0] if isinstance(artifacts, list) and artifacts else None
    artifact = first.get("base64") if isinstance(first, dict) else None
    if not artifact:
        raise ImageGenerationFailed("No image data in response")
    if not isinstance(artifact, str):
        raise ImageDecodeError(f"Image data is {type(artifact).__name__}, not a base64 string")

    logger.info("Image generation successful")
    return to_data_uri(artifact)

__all__ = ["generate_image", "build_request_body", "to_data_uri"]
