"""Logging helpers for the application.

Provides a convenience `get_logger` factory that attaches a stream handler
and a rotating file handler so every module logs in the same format.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import get_settings

_settings = get_settings()

LOG_DIR = _settings.log_dir or os.path.join(os.path.dirname(__file__), "..", "logs")
os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "fitsync.log")

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3)
_file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level=None) -> logging.Logger:
    """Return a configured logger with stream and rotating file handlers.

    The level defaults to the configured `LOG_LEVEL`. Handlers are only
    attached once per logger name.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level or _settings.log_level.upper())
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
    return logger
