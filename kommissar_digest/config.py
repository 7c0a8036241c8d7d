"""Centralised configuration for kommissar_digest.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
STABILITY_API_KEY: str | None = os.getenv("STABILITY_API_KEY")

# ---------------------------------------------------------------------------
# Remote services
# ---------------------------------------------------------------------------
HISTORY_API_BASE_URL: str = "https://history.muffinlabs.com/date"
STABILITY_API_BASE_URL: str = (
    "https://api.stability.ai/v1/generation/stable-diffusion-xl-1024-v1-0"
)

# Seconds; image generation is slow, the events API is not
REQUEST_TIMEOUT: int = 15
IMAGE_REQUEST_TIMEOUT: int = 120

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "STABILITY_API_KEY",
    # services
    "HISTORY_API_BASE_URL",
    "STABILITY_API_BASE_URL",
    "REQUEST_TIMEOUT",
    "IMAGE_REQUEST_TIMEOUT",
]
