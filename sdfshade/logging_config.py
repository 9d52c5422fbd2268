"""Logging setup for command-line use of sdfshade.

Library modules only create loggers; handlers are attached here.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: Union[int, str]) -> int:
    """Numeric logging level for an ``int`` or a name such as ``"debug"``."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown logging level {level!r}")
    return value


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Attach stdout (and optionally file) handlers to the ``sdfshade`` logger.

    Calling it again replaces the handlers installed by the previous call.

    Raises
    ------
    ValueError
        If *level* is an unknown level name.
    """
    level = resolve_level(level)
    logger = logging.getLogger("sdfshade")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.debug("Logging to %d handler(s) at %s", len(handlers), logging.getLevelName(level))
    return logger
