"""Configuration loader module for YAML and environment variable loading."""

from __future__ import annotations

from .env_loader import DEFAULT_ENV_PREFIX, EnvLoader
from .options_loader import load_iso8601_options
from .yaml_loader import YamlLoader
from ..exceptions import ConfigLoadError

__all__ = [
    "DEFAULT_ENV_PREFIX",
    "ConfigLoadError",
    "EnvLoader",
    "YamlLoader",
    "load_iso8601_options",
]
