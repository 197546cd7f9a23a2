"""Console logging for the budget-blitz entrypoints.

The package logger carries only a NullHandler (see ``budget_blitz/__init__``);
the CLI and the pygame front end call ``configure_logging`` at startup.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import IO

LOGGER_NAME = "budget_blitz"
LEVEL_ENV = "BUDGET_BLITZ_LOG_LEVEL"
FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class _ConsoleHandler(logging.StreamHandler):
    """Marks the handler installed by ``configure_logging``."""


def resolve_level(level: int | str | None) -> int:
    """Numeric level from ``level`` or ``$BUDGET_BLITZ_LOG_LEVEL``; INFO if neither parses."""
    if level is None:
        level = os.getenv(LEVEL_ENV, "")
    if isinstance(level, str):
        name = level.strip().upper()
        level = int(name) if name.isdigit() else logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | str | None = None, *, stream: IO[str] | None = None) -> logging.Logger:
    """Send package records to ``stream`` (stderr by default). Later calls are no-ops."""
    logger = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h, _ConsoleHandler) for h in logger.handlers):
        return logger
    handler = _ConsoleHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return logger
