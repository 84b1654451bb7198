"""Configuration for formatter factories: option models, loaders and errors."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    handle_config_error,
    log_config_error,
    suggest_config_fix,
)
from .models import BaseConfig, Iso8601Options

__all__ = [
    # Models
    "BaseConfig",
    "Iso8601Options",
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    # Utility functions
    "handle_config_error",
    "log_config_error",
    "suggest_config_fix",
]
