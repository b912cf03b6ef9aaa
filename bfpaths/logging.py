"""Centralized logging configuration for bfpaths.

All modules obtain loggers through :func:`get_logger` so that every logger is a
child of the package logger ``bfpaths`` and shares its single handler. The
initial level can be set with the ``BFPATHS_LOG_LEVEL`` environment variable
(e.g. ``DEBUG``); otherwise it is INFO.
"""

import logging
import os
import sys
from typing import Optional, Union

#: Name of the package root logger.
LOGGER_NAME = "bfpaths"

#: Environment variable consulted for the initial log level.
LOG_LEVEL_ENV = "BFPATHS_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_ROOT_LOGGER_CONFIGURED = False


def parse_log_level(level: Union[int, str]) -> int:
    """Return a numeric logging level for an int or a level name.

    Args:
        level: Numeric level or case-insensitive name such as ``"debug"``.

    Returns:
        The numeric level.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level '{level}'")
    return value


def setup_root_logger(
    level: Optional[Union[int, str]] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``bfpaths`` logger.

    Repeated calls are no-ops until :func:`reset_logging` is called.

    Args:
        level: Initial level. Defaults to ``$BFPATHS_LOG_LEVEL`` or INFO.
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or logging.INFO

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(parse_log_level(level))
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the package configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger instance with level NOTSET (effective level comes from the root).
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of the package logger and its handlers.

    Args:
        level: Numeric level or level name.
    """
    setup_root_logger()
    numeric = parse_log_level(level)
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        handler.setLevel(numeric)


def enable_debug_logging() -> None:
    """Enable debug logging for the entire package."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO level."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level (mainly for tests)."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
