"""Environment variable overrides for ISO 8601 options."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

DEFAULT_ENV_PREFIX: Final[str] = "FORMAT_TIME_ISO8601_"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


class EnvLoader:
    """Collect prefixed environment variables as flat option values.

    ``FORMAT_TIME_ISO8601_LEADING_T=false`` becomes ``{"leading_t": False}``.
    Boolean words are converted so ``leading_t`` validates; every other value
    is passed through as the raw string for the options model to check.
    """

    def __init__(
        self,
        prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            environ: Source of variables (defaults to ``os.environ``)
        """
        self.prefix: str = prefix
        self.environ: Mapping[str, str] | None = environ

    def load(self) -> dict[str, object]:
        """Load option values from environment variables.

        Returns:
            Option name (lower-cased, prefix removed) mapped to its value
        """
        environ = os.environ if self.environ is None else self.environ
        config: dict[str, object] = {}

        for env_var, raw_value in environ.items():
            if not env_var.startswith(self.prefix):
                continue

            key = env_var[len(self.prefix):].lower()
            if key:
                config[key] = self._convert_bool(raw_value)

        return config

    def _convert_bool(self, value: str) -> object:
        """Return a bool for boolean words, otherwise the string unchanged."""
        lower_value = value.strip().lower()
        if lower_value in _TRUE_VALUES:
            return True
        if lower_value in _FALSE_VALUES:
            return False
        return value
