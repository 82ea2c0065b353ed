"""Logging configuration helpers for the trivia application."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(level: int = logging.INFO) -> Logger:
    """Configure basic logging for the application and return its logger."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # Request-level chatter from the HTTP stack is only useful when debugging.
    logging.getLogger("urllib3").setLevel(max(level, logging.WARNING))
    return logging.getLogger("trivia_app")
