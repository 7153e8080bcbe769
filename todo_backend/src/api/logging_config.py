from __future__ import annotations

import logging
import sys

LOGGER_NAME = "src.api"
LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s: %(message)s"


# PUBLIC_INTERFACE
def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a stdout handler to the application logger and set its level.

    Safe to call more than once: the handler is only added the first time.
    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return logger
