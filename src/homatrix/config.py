"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
matrix model and the logging setup.

Exports:
    HEIGHT (int): Number of rows of every matrix (x, y, z, w).
    DTYPE: NumPy dtype of the matrix storage buffer.
    LOG_LEVEL_ENV (str): Environment variable read by `get_log_level`.
    DEFAULT_LOG_LEVEL (int): Level used when the variable is unset or invalid.
    LOG_FORMAT, LOG_DATE_FORMAT (str): Formatter settings used by `setup_logging`.
"""
import logging
import os

import numpy as np

# Global Constants
HEIGHT: int = 4
DTYPE = np.float64

LOG_LEVEL_ENV: str = "HOMATRIX_LOG_LEVEL"
DEFAULT_LOG_LEVEL: int = logging.WARNING

# Format: Time - Module - Level - Message
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%H:%M:%S'


def get_log_level() -> int:
    """
    Resolve the package log level from the environment.

    Accepts either a level name ("DEBUG", "info", ...) or a number.
    Anything unrecognised falls back to `DEFAULT_LOG_LEVEL`.
    """
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip()
    if not raw:
        return DEFAULT_LOG_LEVEL

    if raw.isdigit():
        return int(raw)

    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL
