"""YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from ..exceptions import ConfigLoadError


class YamlLoader:
    """Loader for YAML configuration files."""

    def load(self, path: Path) -> dict[str, object]:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed configuration as a dictionary

        Raises:
            ConfigLoadError: If the file cannot be read, parsed, or does not
                hold a mapping
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)  # pyright: ignore[reportAny] # yaml.safe_load returns Any
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Failed to load {path}: {e}", str(path)) from e

        # Handle empty files or files with null content
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(
                f"Expected a mapping in {path}, got {type(content).__name__}",  # pyright: ignore[reportAny]
                str(path),
            )
        return {str(key): value for key, value in content.items()}  # pyright: ignore[reportUnknownVariableType,reportAny]
