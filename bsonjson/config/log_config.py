"""Logging setup for applications embedding bsonjson."""
import logging
from typing import Optional, Union

from bsonjson.config.settings import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Configure root logging and return the package logger.

    Args:
        level: Log level name or number. Defaults to BSONJSON_LOG_LEVEL.

    Returns:
        The ``bsonjson`` logger with the level applied
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger("bsonjson")
    logger.setLevel(level)
    return logger
