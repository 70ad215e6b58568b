"""Logging configuration module."""

from __future__ import annotations

import logging

from aesthetic_engine.config.settings import get_settings

# Chatty third-party loggers kept at WARNING unless the engine runs at DEBUG.
_NOISY_LOGGERS = ("aiosqlite", "sqlalchemy.engine")


def configure_logging(level: str | None = None) -> None:
    """Configure root logger according to project conventions."""

    level_name = (level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
