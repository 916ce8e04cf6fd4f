import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
_loggers = set()


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger that writes to stdout with the service-wide format.
    Level defaults to LOG_LEVEL from the environment until set_log_level is called.
    """
    logger = logging.getLogger(name)

    # Handlers are attached once per logger name
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_log_level)
        _loggers.add(name)

    return logger


def set_log_level(level: str):
    """Applies `level` to every logger from get_logger, including later ones."""
    global _log_level
    _log_level = level.upper()
    for name in _loggers:
        logging.getLogger(name).setLevel(_log_level)
