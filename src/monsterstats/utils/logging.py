"""Package logger setup.

Every monsterstats module logs through ``get_logger(__name__)``, so all
records end up under the ``monsterstats`` logger, which only carries a
NullHandler until someone opts in. The explorer app opts in at startup.
A notebook does it with::

    from monsterstats import configure_logging
    configure_logging("DEBUG")  # table loads, filters, figure dispatch
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "monsterstats"
LOG_LEVEL_ENV = "MONSTERSTATS_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _stderr_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
            return h
    return None


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """Send monsterstats records to stderr. The root logger is left alone.

    Args:
        level: Level name or number. Unset means $MONSTERSTATS_LOG_LEVEL,
            then INFO. Unknown names also mean INFO.
        fmt: Record format, DEFAULT_FMT if None.
        datefmt: Timestamp format, DEFAULT_DATEFMT if None.
        force: Drop every existing handler first. Without it a second call
            only updates the level and keeps the stderr handler it finds.

    Returns:
        The ``monsterstats`` logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)

    console = _stderr_handler(logger)
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
        logger.addHandler(console)
    console.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a monsterstats module; the package logger if name is None."""
    return logging.getLogger(name or LOGGER_NAME)
