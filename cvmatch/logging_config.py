"""Logging setup for applications embedding the matcher."""

import os
import sys
import logging
from typing import Optional

from .config import ENV_LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the cvmatch logger with a console handler.

    Args:
        level: Log level name; defaults to CVMATCH_LOG_LEVEL or WARNING

    Returns:
        The configured "cvmatch" logger
    """
    level_name = (level or os.getenv(ENV_LOG_LEVEL) or "WARNING").upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    logger = logging.getLogger("cvmatch")
    logger.setLevel(log_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
