from __future__ import annotations

"""Logging setup for steamer plugins.

Call :func:`setup_logging` once from the command line entry point. Library
code only creates module loggers and never configures handlers itself.
"""

import logging
import logging.config
import os

from .config import LOG_LEVEL_ENV

__all__ = ["setup_logging"]


def setup_logging(level: str | int | None = None) -> None:
    """Configure a console handler at *level* (env ``STEAMER_LOG_LEVEL`` or WARNING)."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or "WARNING"
    if isinstance(level, str) and not isinstance(logging.getLevelName(level), int):
        level = "WARNING"

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "simple",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "steamer_plugin": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    })
    logging.getLogger("steamer_plugin").debug("Logging initialised at %s", level)
