"""
Logging helpers.

arithmos logs through the standard library: every module owns a
`logging.getLogger(__name__)` logger, and the package logger carries a
NullHandler so nothing is printed unless the application configures
logging. `configure_logging` is a convenience for scripts and tests.
"""

import logging
import os
from typing import Optional, Union

PACKAGE_LOGGER = "arithmos"
DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger or one of its children."""
    if not name:
        return logging.getLogger(PACKAGE_LOGGER)
    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(
    level: Optional[Union[int, str]] = None,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level; defaults to $ARITHMOS_LOG_LEVEL or WARNING
        fmt: Format string for the handler

    Returns:
        The configured package logger

    Raises:
        ValueError: If level names an unknown logging level
    """
    if level is None:
        level = os.environ.get("ARITHMOS_LOG_LEVEL", "WARNING")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = get_logger()
    logger.setLevel(level)
    if not any(getattr(h, "_arithmos_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        handler._arithmos_handler = True
        logger.addHandler(handler)
    return logger
