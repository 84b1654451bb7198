"""ISO 8601 time formatters.

:func:`iso8601` selects its parts by table lookup on the option values and
assembles them with :func:`~format_time.formatting.template.time_template`,
producing ``<T?><HH><sep><MM><sep><SS[.fff]>``. Options are validated when
the formatter is built, so an invalid option never reaches render time.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

from pydantic import ValidationError

from format_time.config.exceptions import handle_config_error
from format_time.config.loader import DEFAULT_ENV_PREFIX, load_iso8601_options
from format_time.config.models import Iso8601Options, by_field_name
from format_time.formatting.fields import (
    floor_seconds2,
    hours2,
    minutes2,
    seconds2,
    seconds_ms,
)
from format_time.formatting.template import time_template
from format_time.types.aliases import Iso8601Format, Iso8601Round, TimeFormatter

logger = logging.getLogger(__name__)

LEADING_MARKERS: Final[Mapping[bool, str]] = MappingProxyType({
    True: "T",
    False: "",
})

SEPARATORS: Final[Mapping[Iso8601Format, str]] = MappingProxyType({
    "basic": "",
    "extended": ":",
})

SECONDS_FORMATTERS: Final[Mapping[Iso8601Round, TimeFormatter]] = MappingProxyType({
    "none": seconds2,
    "seconds": floor_seconds2,
    "ms": seconds_ms,
})


def resolve_options(
    options: Iso8601Options | Mapping[str, object] | None = None,
    /,
    **overrides: object,
) -> Iso8601Options:
    """Merge and validate ISO 8601 options.

    Args:
        options: Base options, as a model or a mapping keyed by field name
            or alias (``leadingT``)
        **overrides: Individual options layered over ``options``

    Returns:
        Validated options

    Raises:
        ConfigValidationError: If any key or value is not recognised
    """
    values: dict[str, object] = {}
    if isinstance(options, Iso8601Options):
        values.update(options.model_dump())
    elif options is not None:
        values.update(by_field_name(Iso8601Options, options))
    values.update(by_field_name(Iso8601Options, overrides))

    try:
        return Iso8601Options.model_validate(values)
    except ValidationError as e:
        raise handle_config_error(e, "ISO 8601 formatter construction") from e


def iso8601(
    options: Iso8601Options | Mapping[str, object] | None = None,
    /,
    **overrides: object,
) -> TimeFormatter:
    """Construct a formatter rendering a time in ISO 8601 format.

    Args:
        options: ``format`` (``"basic"`` or ``"extended"``), ``round``
            (``"none"``, ``"seconds"`` or ``"ms"``) and ``leading_t``
            (alias ``leadingT``), as an :class:`Iso8601Options` or a mapping
        **overrides: The same options given as keyword arguments

    Returns:
        Formatter producing e.g. ``"T11:58:27.639"``

    Raises:
        ConfigValidationError: If an option is unknown or has an unsupported value

    Examples:
        >>> iso8601()(Time(hours=13, minutes=5, seconds=30))
        'T13:05:30'
        >>> iso8601(format="basic", round="ms")(Time(hours=11, minutes=58, seconds=27.63981))
        'T115827.639'
    """
    resolved = resolve_options(options, **overrides)
    separator = SEPARATORS[resolved.format]

    logger.debug(
        "Building ISO 8601 formatter: format=%s round=%s leading_t=%s",
        resolved.format,
        resolved.round,
        resolved.leading_t,
    )
    return time_template(
        [LEADING_MARKERS[resolved.leading_t], separator, separator, ""],
        hours2,
        minutes2,
        SECONDS_FORMATTERS[resolved.round],
    )


def iso8601_from_config(
    path: Path | None = None,
    *,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> TimeFormatter:
    """Construct an ISO 8601 formatter from a YAML file and environment overrides.

    See :func:`~format_time.config.loader.load_iso8601_options` for the
    sources and their precedence.
    """
    return iso8601(load_iso8601_options(path, env_prefix=env_prefix))


# HH:MM:SS with whole seconds and no leading marker, for display to people
human_iso8601: Final[TimeFormatter] = iso8601(round="seconds", leading_t=False)
