"""Logging configuration helpers for the quiz console."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.WARNING) -> Logger:
    """Configure basic logging for the application and return its logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("quiz_console")
