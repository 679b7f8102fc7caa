"""Logging utilities.

Decisions are logged through the ``squeeze5`` logger.  Nothing is written
until :func:`configure_logging` attaches a file handler, which keeps the
engine silent when embedded in another program.
"""
import logging
import os

LOG_FILE = 'squeeze5_ai.log'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger('squeeze5')
logger.addHandler(logging.NullHandler())


def configure_logging(path: str = LOG_FILE, level: int = logging.INFO) -> logging.Handler:
    """Append log records to ``path`` and return the handler."""

    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(path):
            return h
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def log_action(action: str) -> None:
    """Log a game action."""

    logger.info(action)
