"""Logging configuration for the ``spend_report`` package.

The CLI calls ``setup_logging`` once at startup. Library modules only use
``logging.getLogger(__name__)`` and never attach handlers themselves.
Everything goes to stderr; stdout carries the report alone.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

_PKG_LOGGER_NAME = "spend_report"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = getattr(logging, name, None)
        if isinstance(numeric, int):
            return numeric
    return logging.WARNING


def setup_logging(level: int | str | None = None, *, stream: IO[str] | None = None) -> logging.Logger:
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    numeric = _parse_level(level)

    for h in list(logger.handlers):
        if getattr(h, "_spend_report", False):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    handler._spend_report = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(numeric)
    # root handlers must not duplicate our lines
    logger.propagate = False
    return logger
