"""Logging setup for applications using format-time.

The library itself only emits records through module-level loggers and
installs a ``NullHandler`` on the package logger. Applications that want the
DEBUG records from formatter construction and configuration loading can call
:func:`configure_logging`.
"""

import logging
import sys
from typing import Final

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

PACKAGE_LOGGER_NAME: Final[str] = "format_time"


def configure_logging(
    *,
    log_level: str = "INFO",
    enable_console: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """Configure console logging for the format_time package logger.

    Calling this again replaces the handlers installed by the previous call
    instead of adding duplicates.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable console output handler
        log_format: Format string for console records

    Returns:
        The configured package logger

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> iso8601(round="ms")  # logs the selected options
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    level = getattr(logging, log_level.upper(), logging.INFO)  # pyright: ignore[reportAny]
    package_logger.setLevel(level)  # pyright: ignore[reportAny]

    # Remove console handlers from earlier calls to avoid duplicates
    for handler in list(package_logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            package_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(log_format))
        package_logger.addHandler(console_handler)

    return package_logger
