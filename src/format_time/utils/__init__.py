"""Shared utilities: logging setup for applications embedding format-time."""

from format_time.utils.logging import (
    DEFAULT_LOG_FORMAT,
    configure_logging,
)

__all__ = [
    "DEFAULT_LOG_FORMAT",
    "configure_logging",
]
