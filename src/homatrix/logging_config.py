"""
Logging Configuration
Library modules only create `logging.getLogger(__name__)` loggers; the
application decides where their records go by calling `setup_logging`.
"""
import logging
import sys
from typing import Optional

from homatrix.config import LOG_DATE_FORMAT, LOG_FORMAT, get_log_level

PACKAGE_LOGGER = "homatrix"


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the 'homatrix' loggers to stdout and, optionally, a file.

    Repeated calls replace the previous handlers instead of stacking them.

    Args:
        level: Logging level. Defaults to HOMATRIX_LOG_LEVEL from the environment.
        log_file: Optional path of a UTF-8 log file, truncated on setup.

    Returns:
        The configured package logger.
    """
    level = get_log_level() if level is None else level

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
