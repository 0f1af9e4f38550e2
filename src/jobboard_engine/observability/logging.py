"""Shared logging utilities for the engine and its backend client.

Usage example:
    from jobboard_engine.observability.logging import get_logger

    logger = get_logger("jobboard_engine.application.status_engine")
    logger.info("Application %s: %s -> %s", key, "pending", "shortlisted")
"""

from __future__ import annotations

import logging
import os
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_LEVEL_ENV = "JOBBOARD_LOG_LEVEL"


def _resolve_level() -> int:
    name = os.getenv(_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelNamesMapping().get(name)
    return logging.INFO if level is None else level


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a single stderr handler and UTC timestamps.

    The level comes from ``JOBBOARD_LOG_LEVEL`` the first time a name is
    requested (INFO when unset or unrecognised).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level())
        logger.propagate = False
    return logger
