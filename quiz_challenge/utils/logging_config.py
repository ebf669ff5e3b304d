"""Logging configuration helpers for the quiz application."""

from __future__ import annotations

import logging
from logging import Logger
import os

LOG_LEVEL_ENV_VAR = "QUIZ_CHALLENGE_LOG_LEVEL"


def configure_logging(level: str | None = None) -> Logger:
    """Configure basic logging for the application and return the package logger.

    The level falls back to ``QUIZ_CHALLENGE_LOG_LEVEL`` and then to INFO.
    Unknown level names are treated as INFO.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV_VAR, "INFO")).upper()
    resolved = logging.getLevelName(level_name)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    logger = logging.getLogger("quiz_challenge")
    logger.setLevel(resolved)
    return logger
