"""Field formatters: pure functions rendering one field of a time value.

Each function accepts any object exposing the field it reads (see
:mod:`format_time.types.protocols`) and returns a string. None of them clamp,
wrap or validate their input; the only range transform is the 12-hour
mapping in :func:`hours12` and :func:`hours122`.

Numbers are rendered with a minimal decimal representation: integral values
have no trailing ``.0`` and fractional seconds are never rounded unless the
formatter's name says so (``floor_seconds``, ``seconds_ms``).
"""

import math
import re
from typing import Final

from format_time.types.aliases import AmPm
from format_time.types.protocols import HasHours, HasMinutes, HasSeconds

_PAD_CHAR: Final[str] = "0"
_PAD_WIDTH: Final[int] = 2

# seconds_ms renders floor(seconds * 1000) as at least SS + mmm digits
_MS_PER_SECOND: Final[int] = 1000
_MS_DIGITS: Final[int] = 3
_MS_PAD_WIDTH: Final[int] = _PAD_WIDTH + _MS_DIGITS

_NOON: Final[int] = 12

# Floats at or above this magnitude print in exponent form, like repr
_INTEGRAL_TEXT_LIMIT: Final[float] = 1e16

# Leading run of digits (the whole part of a non-negative number)
_WHOLE_PART_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\d+", re.ASCII)


def _number(value: float) -> str:
    """Render a number without a trailing ``.0``.

    Integral floats below 1e16 print as integers (``30.0`` -> ``"30"``). Other
    floats use the shortest round-trip text, so large magnitudes keep exponent
    form (``1e22`` -> ``"1e+22"``).
    """
    if isinstance(value, float) and value.is_integer() and abs(value) < _INTEGRAL_TEXT_LIMIT:
        return str(int(value))
    return str(value)


def _pad(text: str, width: int = _PAD_WIDTH) -> str:
    """Left-pad text with zeros to at least ``width`` characters."""
    return text.rjust(width, _PAD_CHAR)


def _floor(value: float) -> float:
    """Round toward negative infinity, passing non-finite values through."""
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return math.floor(value)


def _twelve_hour(value: float) -> float:
    # Python's modulo already lands in [0, 12) for negative hours
    return value % _NOON


def hours(time: HasHours) -> str:
    """Format the hours as a 24-hour numeric string.

    Example:
        >>> hours(Time(hours=7))
        '7'
    """
    return _number(time.hours)


def hours2(time: HasHours) -> str:
    """Format the hours as a 24-hour numeric string of at least two digits."""
    return _pad(_number(time.hours))


def hours12(time: HasHours) -> str:
    """Format the hours as a 12-hour numeric string.

    Hours 0 and 12 both render as ``"0"``.
    """
    return _number(_twelve_hour(time.hours))


def hours122(time: HasHours) -> str:
    """Format the hours as a 12-hour numeric string of at least two digits."""
    return _pad(_number(_twelve_hour(time.hours)))


def am_pm(time: HasHours) -> AmPm:
    """Return ``"AM"`` before noon and ``"PM"`` from noon onwards."""
    return "AM" if time.hours < _NOON else "PM"


def minutes(time: HasMinutes) -> str:
    """Format the minutes as a numeric string."""
    return _number(time.minutes)


def minutes2(time: HasMinutes) -> str:
    """Format the minutes as a numeric string of at least two digits."""
    return _pad(_number(time.minutes))


def seconds(time: HasSeconds) -> str:
    """Format the seconds as a numeric string.

    Fractional seconds are not rounded, so this may produce ``"2.234"``.
    """
    return _number(time.seconds)


def seconds2(time: HasSeconds) -> str:
    """Format the seconds with a whole part of at least two digits.

    Fractional seconds are not rounded, so this may produce ``"02.234"``.
    Text without a leading digit (negative or non-finite values) is left as is.
    """
    return _WHOLE_PART_PATTERN.sub(
        lambda match: _pad(match.group()), _number(time.seconds), count=1
    )


def floor_seconds(time: HasSeconds) -> str:
    """Round the seconds down and format them as a numeric string."""
    return _number(_floor(time.seconds))


def floor_seconds2(time: HasSeconds) -> str:
    """Round the seconds down and format them with at least two digits."""
    return _pad(_number(_floor(time.seconds)))


def seconds_ms(time: HasSeconds) -> str:
    """Round the seconds down to whole milliseconds and format as ``SS.mmm``.

    The millisecond part is always three digits and the whole-second part at
    least two. Rounding is toward negative infinity, never to nearest.

    Examples:
        >>> seconds_ms(Time(seconds=1.0018))
        '01.001'
        >>> seconds_ms(Time(seconds=22.0018))
        '22.001'
        >>> seconds_ms(Time(seconds=-0.5))
        '-00.500'
    """
    total = _floor(time.seconds * _MS_PER_SECOND)
    if isinstance(total, float):
        # Only non-finite values survive _floor as floats
        return _number(total)

    sign = "-" if total < 0 else ""
    digits = _pad(str(abs(total)), _MS_PAD_WIDTH)
    return f"{sign}{digits[:-_MS_DIGITS]}.{digits[-_MS_DIGITS:]}"
