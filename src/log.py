"""Log utilities."""

import logging
import os

from rich.logging import RichHandler

# environment variable that can override default log level for all loggers
LOG_LEVEL_ENV_VAR = "QUOTA_GATE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "DEBUG"


def get_logger(name: str) -> logging.Logger:
    """Retrieve logger with the provided name.

    Log level is taken from `QUOTA_GATE_LOG_LEVEL` environment variable, if
    set, otherwise everything down to DEBUG level is logged. Please note that
    token values must never be passed to any logger.
    """
    logger = logging.getLogger(name)
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        level = DEFAULT_LOG_LEVEL
    logger.setLevel(level)
    logger.handlers = [RichHandler(show_path=False)]
    logger.propagate = False
    return logger
