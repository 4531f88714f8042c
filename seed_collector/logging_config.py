"""Logging setup for the command-line entry point."""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send ``seed_collector`` log records to ``stream`` (``stderr`` by default).

    Calling this again only adjusts the level.
    """

    global _configured

    logger = logging.getLogger("seed_collector")
    logger.setLevel(level)

    if _configured:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)

    _configured = True
    return logger
