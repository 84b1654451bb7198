"""Data models for format-time.

The time value itself is a plain immutable record. It is deliberately not
validated or normalised: producers decide what ranges they emit and the
formatters render whatever they are given.
"""

import datetime
from dataclasses import dataclass

_MICROSECONDS_PER_SECOND = 1_000_000


@dataclass(slots=True, frozen=True)
class Time:
    """Immutable time-of-day value.

    Omitted fields default to zero, so ``Time()`` is midnight.
    """

    hours: float = 0
    minutes: float = 0
    seconds: float = 0

    @classmethod
    def from_datetime(cls, value: datetime.time | datetime.datetime) -> "Time":
        """Build a Time from the clock fields of a ``datetime`` or ``time``.

        Microseconds become the fractional part of ``seconds``. Date and
        timezone information is ignored.

        Args:
            value: Source value

        Returns:
            Time carrying the same hour, minute and second

        Example:
            >>> Time.from_datetime(datetime.time(13, 5, 30, 250000))
            Time(hours=13, minutes=5, seconds=30.25)
        """
        seconds: float = value.second
        if value.microsecond:
            seconds = value.second + value.microsecond / _MICROSECONDS_PER_SECOND
        return cls(hours=value.hour, minutes=value.minute, seconds=seconds)
