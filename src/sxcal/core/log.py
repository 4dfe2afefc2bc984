"""
Logging setup for sxcal.

Library modules only call ``logging.getLogger(__name__)``; nothing is printed
unless the application (or the CLI) calls :func:`configure`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

DEFAULT_LOG_LEVEL = logging.WARNING

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _get_log_level() -> int:
    """Level from SXCAL_LOG_LEVEL, or the default."""
    return _LEVELS.get(os.environ.get("SXCAL_LOG_LEVEL", "").strip().upper(), DEFAULT_LOG_LEVEL)


def get_logger(name: str) -> logging.Logger:
    """Logger under the ``sxcal`` hierarchy."""
    if name != "sxcal" and not name.startswith("sxcal."):
        name = f"sxcal.{name}"
    return logging.getLogger(name)


def configure(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stderr handler to the root ``sxcal`` logger.

    Args:
        level: logging level or its name; defaults to SXCAL_LOG_LEVEL, then WARNING.

    Returns:
        The root ``sxcal`` logger.
    """
    if level is None:
        lvl = _get_log_level()
    elif isinstance(level, str):
        if level.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level '{level}'. Available: {sorted(_LEVELS)}")
        lvl = _LEVELS[level.upper()]
    else:
        lvl = level

    logger = logging.getLogger("sxcal")
    logger.setLevel(lvl)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
    return logger
