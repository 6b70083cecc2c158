"""Logging helpers for safe_unpack.

Library modules only ever fetch loggers below ``safe_unpack``; that logger
carries a ``NullHandler`` so nothing is emitted unless the application
configures logging. The CLI does so through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from .constants import LOG_LEVEL_ENV

LOGGER_NAME = "safe_unpack"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None, *, force: bool = False) -> logging.Logger:
    """Configure root logging for command line use.

    The level comes from ``level``, then ``SAFE_UNPACK_LOG_LEVEL``, then
    ``INFO``. An unknown level name falls back to ``INFO`` with a warning.
    """
    invalid_level = None
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, str):
        level_name = level.upper()
        if level_name in VALID_LEVELS:
            level = getattr(logging, level_name)
        else:
            invalid_level = level
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )
    logger = get_logger()
    if invalid_level:
        logger.warning(
            "Invalid %s %r; falling back to INFO. Valid values: %s.",
            LOG_LEVEL_ENV, invalid_level, ", ".join(VALID_LEVELS),
        )
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
