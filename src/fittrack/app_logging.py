"""Logging setup for the fittrack logger tree."""

import logging

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the ``fittrack`` logger and set its level.

    Safe to call on every app start: the handler is only added once, while the
    level is always refreshed so a rebuilt app can change it.
    """
    logger = logging.getLogger("fittrack")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
