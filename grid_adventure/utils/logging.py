"""Shared logger for the engine.

Streamlit re-executes the app script on every interaction, so handler setup
must be idempotent: :func:`get_logger` attaches its stream handler only once
and later calls just adjust the level.
"""

import logging
from typing import Optional


LOGGER_NAME = "grid_adventure"

_LOGGER: Optional[logging.Logger] = None


def get_logger(level: int | str | None = None) -> logging.Logger:
    """Return the package logger, configuring it on first use.

    Args:
        level: Optional new level (``logging.INFO`` or a name like ``"DEBUG"``).
    """
    global _LOGGER
    if _LOGGER is None:
        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("[grid_adventure] %(levelname)s %(name)s: %(message)s")
            )
            logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        logger.propagate = True
        _LOGGER = logger

    if level is not None:
        _LOGGER.setLevel(level)
    return _LOGGER
