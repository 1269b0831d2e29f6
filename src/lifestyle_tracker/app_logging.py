"""Logging setup for the API process."""

import logging

_LOGGER_NAME = "lifestyle_tracker"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level_for(environment: str) -> int:
    """Return the log level used in a deployment environment."""
    return logging.DEBUG if environment == "local" else logging.INFO


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stream handler to the package logger and return it."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
