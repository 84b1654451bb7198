"""Template composition for building custom time formatters.

:func:`time_template` is the single combination primitive: it interleaves
literal text fragments with formatters and returns one formatter that renders
them in order. :func:`compile_template` builds the same thing from a
placeholder string such as ``"{hours12}:{minutes2} {am_pm}"`` and validates
the placeholders when the template is compiled, not when it is rendered.
"""

import logging
import re
from collections.abc import Mapping, Sequence, Set
from types import MappingProxyType
from typing import Final

from format_time.formatting import fields
from format_time.types.aliases import TimeFormatter
from format_time.types.protocols import TimeLike

logger = logging.getLogger(__name__)

# Placeholder names usable in compile_template, mapped to their formatters
FIELD_FORMATTERS: Final[Mapping[str, TimeFormatter]] = MappingProxyType({
    "hours": fields.hours,
    "hours2": fields.hours2,
    "hours12": fields.hours12,
    "hours122": fields.hours122,
    "am_pm": fields.am_pm,
    "minutes": fields.minutes,
    "minutes2": fields.minutes2,
    "seconds": fields.seconds,
    "seconds2": fields.seconds2,
    "floor_seconds": fields.floor_seconds,
    "floor_seconds2": fields.floor_seconds2,
    "seconds_ms": fields.seconds_ms,
})

KNOWN_PLACEHOLDERS: Final[Set[str]] = frozenset(FIELD_FORMATTERS)

# Matches escaped braces and {placeholder_name} (lowercase letters, numbers, underscores)
_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{\{|\}\}|\{([a-z_][a-z0-9_]*)\}")


class TemplateError(ValueError):
    """Raised when template validation or composition fails."""

    pass


def time_template(fragments: Sequence[str], *formatters: TimeFormatter) -> TimeFormatter:
    """Construct a formatter that interleaves text fragments with formatters.

    The result renders ``fragments[0]``, then ``formatters[0](time)``, then
    ``fragments[1]`` and so on, ending with the last fragment. Trailing
    formatter slots may be left out; they contribute nothing to the output.

    Args:
        fragments: Literal text surrounding each placeholder slot (non-empty)
        *formatters: At most ``len(fragments) - 1`` formatters

    Returns:
        Formatter rendering the whole template

    Raises:
        TemplateError: If there are no fragments or too many formatters

    Example:
        >>> short_12_hour = time_template(["", ":", " ", ""], hours12, minutes2, am_pm)
        >>> short_12_hour(Time(hours=13, minutes=5))
        '1:05 PM'
    """
    texts = tuple(fragments)
    slots = tuple(formatters)

    if not texts:
        msg = "Template requires at least one text fragment"
        raise TemplateError(msg)
    if len(slots) >= len(texts):
        msg = (
            f"Template has {len(texts) - 1} placeholder slots "
            f"but {len(slots)} formatters were given"
        )
        raise TemplateError(msg)

    def render(time: TimeLike) -> str:
        parts: list[str] = [texts[0]]
        for text, formatter in zip(texts[1:], slots):
            parts.append(formatter(time))
            parts.append(text)
        # Fragments beyond the supplied formatters follow empty slots
        parts.extend(texts[len(slots) + 1 :])
        return "".join(parts)

    return render


def identify_placeholders(template: str) -> Set[str]:
    """Identify all placeholders in a template string.

    Args:
        template: Template string potentially containing {placeholder} markers

    Returns:
        Set of placeholder names found in the template (without braces)

    Example:
        >>> identify_placeholders("{hours12}:{minutes2} {am_pm}")
        frozenset({'hours12', 'minutes2', 'am_pm'})
    """
    names = (match.group(1) for match in _TOKEN_PATTERN.finditer(template))
    return frozenset(name for name in names if name is not None)


def validate_template(template: str) -> None:
    """Validate that a template only uses known placeholders.

    Args:
        template: Template string to validate

    Raises:
        TemplateError: If template contains unknown placeholders
    """
    unknown = identify_placeholders(template) - KNOWN_PLACEHOLDERS

    if unknown:
        unknown_list = sorted(unknown)
        known_list = sorted(KNOWN_PLACEHOLDERS)
        msg = (
            f"Template contains unknown placeholders: {unknown_list}. "
            f"Known placeholders are: {known_list}"
        )
        raise TemplateError(msg)


def compile_template(template: str) -> TimeFormatter:
    """Compile a placeholder template into a formatter.

    ``{name}`` inserts the field formatter registered under ``name`` in
    :data:`FIELD_FORMATTERS`; ``{{`` and ``}}`` insert literal braces. Any
    other text is copied verbatim.

    Args:
        template: Template string such as ``"{hours2}:{minutes2}"``

    Returns:
        Formatter rendering the template

    Raises:
        TemplateError: If template contains unknown placeholders

    Example:
        >>> clock = compile_template("{hours12}:{minutes2} {am_pm}")
        >>> clock(Time(hours=0, minutes=30))
        '0:30 AM'
    """
    validate_template(template)

    fragments: list[str] = []
    formatters: list[TimeFormatter] = []
    text: list[str] = []
    position = 0

    for match in _TOKEN_PATTERN.finditer(template):
        text.append(template[position : match.start()])
        position = match.end()

        name = match.group(1)
        if name is None:
            # Escaped brace: keep one of the pair as literal text
            text.append(match.group()[0])
            continue

        fragments.append("".join(text))
        formatters.append(FIELD_FORMATTERS[name])
        text = []

    text.append(template[position:])
    fragments.append("".join(text))

    logger.debug(
        "Compiled time template %r with %d placeholders", template, len(formatters)
    )
    return time_template(fragments, *formatters)
