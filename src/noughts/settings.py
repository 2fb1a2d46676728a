"""Runtime settings, read from the environment first.

NOUGHTS_LOG_LEVEL sets the default log level by name (DEBUG, INFO, WARNING, ...).
"""
import logging
import os

LOG_LEVEL_ENV = "NOUGHTS_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(message)s"


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = (os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    level = logging.getLevelName(name) if name else logging.INFO
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO
