"""Logger helper shared by the entrypoints."""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger, configuring the root handler on first use.

    The level comes from ``ELPRIS_LOG_LEVEL`` (default INFO).
    """
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        level = os.getenv("ELPRIS_LOG_LEVEL", "INFO").upper()
        logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    return logger
