"""format-time - render time-of-day values as text in a variety of layouts.

Formatters are pure functions from a time value (anything with ``hours``,
``minutes`` and ``seconds``) to a string. They can be composed with
:func:`time_template` or :func:`compile_template`, and :func:`iso8601` builds
ISO 8601 formatters from a small set of options.
"""

import logging

from format_time.config import ConfigError, ConfigValidationError, Iso8601Options
from format_time.formatting import (
    FIELD_FORMATTERS,
    KNOWN_PLACEHOLDERS,
    TemplateError,
    am_pm,
    compile_template,
    floor_seconds,
    floor_seconds2,
    hours,
    hours2,
    hours12,
    hours122,
    human_iso8601,
    identify_placeholders,
    iso8601,
    iso8601_from_config,
    minutes,
    minutes2,
    seconds,
    seconds2,
    seconds_ms,
    time_template,
    validate_template,
)
from format_time.types import (
    AmPm,
    HasHours,
    HasMinutes,
    HasSeconds,
    Time,
    TimeFormatter,
    TimeLike,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "AmPm",
    "HasHours",
    "HasMinutes",
    "HasSeconds",
    "Time",
    "TimeFormatter",
    "TimeLike",
    # Field formatters
    "am_pm",
    "floor_seconds",
    "floor_seconds2",
    "hours",
    "hours2",
    "hours12",
    "hours122",
    "minutes",
    "minutes2",
    "seconds",
    "seconds2",
    "seconds_ms",
    # Composition
    "FIELD_FORMATTERS",
    "KNOWN_PLACEHOLDERS",
    "TemplateError",
    "compile_template",
    "identify_placeholders",
    "time_template",
    "validate_template",
    # ISO 8601
    "ConfigError",
    "ConfigValidationError",
    "Iso8601Options",
    "human_iso8601",
    "iso8601",
    "iso8601_from_config",
]
