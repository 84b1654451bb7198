"""Time formatters.

This package provides pure, stateless formatters for:
- Individual fields (hours, minutes, seconds, AM/PM)
- Template composition of fields and literal text
- ISO 8601 layouts with configurable rounding, separators and leading marker

Every formatter is a plain function from a time value to a string and is
safe to share between threads.
"""

from format_time.formatting.fields import (
    am_pm,
    floor_seconds,
    floor_seconds2,
    hours,
    hours2,
    hours12,
    hours122,
    minutes,
    minutes2,
    seconds,
    seconds2,
    seconds_ms,
)
from format_time.formatting.iso8601 import (
    human_iso8601,
    iso8601,
    iso8601_from_config,
    resolve_options,
)
from format_time.formatting.template import (
    FIELD_FORMATTERS,
    KNOWN_PLACEHOLDERS,
    TemplateError,
    compile_template,
    identify_placeholders,
    time_template,
    validate_template,
)

__all__ = [
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
    # Template composition
    "FIELD_FORMATTERS",
    "KNOWN_PLACEHOLDERS",
    "TemplateError",
    "compile_template",
    "identify_placeholders",
    "time_template",
    "validate_template",
    # ISO 8601
    "human_iso8601",
    "iso8601",
    "iso8601_from_config",
    "resolve_options",
]
