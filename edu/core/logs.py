"""Logging setup shared by the CLIs."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(name)s] %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the ``edu`` logger.

    Calling it again only changes the level. Unknown level names fall back to
    WARNING.
    """
    global _handler
    logger = logging.getLogger("edu")
    resolved = logging.getLevelName((level or "").upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(_handler)
    logger.setLevel(resolved)
    return logger
