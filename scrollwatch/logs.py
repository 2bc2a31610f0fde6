"""Logging setup for applications embedding scrollwatch."""

from __future__ import annotations

import logging

from .config import AppConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: AppConfig | str | int = "WARNING") -> None:
    """Attach a basic stream handler to the ``scrollwatch`` logger.

    ``level`` may be a logging level or an ``AppConfig``, whose ``log_level`` is used.
    Unknown level names fall back to ``WARNING``.
    """

    if isinstance(level, AppConfig):
        level = level.log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger = logging.getLogger("scrollwatch")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


__all__ = ["configure_logging"]
