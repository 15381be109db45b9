from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "pdf_prescan"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    """Package logger with a single stderr handler (added once)."""
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
