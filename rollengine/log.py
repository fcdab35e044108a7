from __future__ import annotations

import logging
import sys
from typing import Union

PACKAGE_LOGGER = "rollengine"

_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Entry points (CLI, host app) call this; library modules only use
    logging.getLogger(__name__). Repeated calls just adjust the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    return logger
