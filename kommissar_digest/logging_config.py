"""Logging setup for the digest workflow.

Importing this module applies the default format and level once. Library
modules only call ``logging.getLogger(__name__)`` and never configure handlers
themselves.
"""

import logging

LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

# requests/urllib3 log every pooled connection at DEBUG
logging.getLogger("urllib3").setLevel(logging.WARNING)

__all__ = ["logging", "LOG_FORMAT"]
