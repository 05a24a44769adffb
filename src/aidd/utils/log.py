"""Process-wide logging configuration.

The engine logs through module-level :func:`logging.getLogger` loggers;
only the CLI entry point calls :func:`configure_logging`, once.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "AIDD_LOG_LEVEL"
"""Environment variable selecting the log level (e.g. ``debug``)."""

DEFAULT_LOG_LEVEL: int = logging.WARNING

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(value: str | None) -> int:
    """Map a level name such as ``"info"`` to its numeric value.

    Unknown or empty names fall back to :data:`DEFAULT_LOG_LEVEL`.
    """
    if not value:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging(environ: dict[str, str] | None = None) -> int:
    """Configure the root logger to stderr and return the chosen level."""
    env = os.environ if environ is None else environ
    level = resolve_log_level(env.get(LOG_LEVEL_ENV))
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
