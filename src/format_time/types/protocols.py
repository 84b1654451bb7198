"""Protocol definitions for time value inputs.

Each field formatter reads only the fields it needs, so its parameter is typed
with the narrowest protocol below. Any object exposing the attributes satisfies
the protocol; no inheritance is required.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasHours(Protocol):
    """Anything exposing a numeric ``hours`` attribute."""

    @property
    def hours(self) -> float: ...


@runtime_checkable
class HasMinutes(Protocol):
    """Anything exposing a numeric ``minutes`` attribute."""

    @property
    def minutes(self) -> float: ...


@runtime_checkable
class HasSeconds(Protocol):
    """Anything exposing a numeric ``seconds`` attribute.

    ``seconds`` may carry a fractional part.
    """

    @property
    def seconds(self) -> float: ...


@runtime_checkable
class TimeLike(HasHours, HasMinutes, HasSeconds, Protocol):
    """A complete time of day: hours, minutes and (fractional) seconds."""
