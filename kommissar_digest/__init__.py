"""Top-level package for Kommissar's Digest.

Fetches today's events in history, keeps the communism-related ones and
illustrates each with a generated image. The public entry point is
:func:`run`; ``from kommissar_digest import run; cards = run()``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("kommissar-digest")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .workflows.event_pipeline import run  # convenience re-export

__all__ = ["run", "__version__"]
