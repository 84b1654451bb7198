"""Load ISO 8601 formatter options from a YAML file and the environment."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import ConfigError, handle_config_error, log_config_error
from ..models import Iso8601Options, by_field_name
from .env_loader import DEFAULT_ENV_PREFIX, EnvLoader
from .yaml_loader import YamlLoader

logger = logging.getLogger(__name__)


def load_iso8601_options(
    path: Path | None = None,
    *,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> Iso8601Options:
    """Load ISO 8601 options with environment overrides.

    Precedence (highest first): environment variables, the YAML file,
    model defaults.

    Args:
        path: Optional YAML file holding a mapping of options
        env_prefix: Prefix of the environment variables to apply

    Returns:
        Validated options

    Raises:
        ConfigLoadError: If the file cannot be loaded
        ConfigValidationError: If the merged options are invalid

    Example:
        >>> # iso8601.yaml contains "format: basic"
        >>> load_iso8601_options(Path("iso8601.yaml"))
        Iso8601Options(format='basic', round='none', leading_t=True)
    """
    values: dict[str, object] = {}
    source = "defaults"

    try:
        if path is not None:
            source = str(path)
            values.update(by_field_name(Iso8601Options, YamlLoader().load(path)))

        env_values = EnvLoader(prefix=env_prefix).load()
        if env_values:
            logger.debug("Applying %d environment overrides for ISO 8601 options", len(env_values))
        values.update(by_field_name(Iso8601Options, env_values))

        options = Iso8601Options.model_validate(values)
    except (ConfigError, ValidationError) as e:
        error = handle_config_error(e, f"loading ISO 8601 options from {source}")
        log_config_error(error)
        if error is e:
            raise
        raise error from e

    logger.debug("Loaded ISO 8601 options from %s: %s", source, options)
    return options
