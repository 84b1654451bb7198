"""Type definitions and protocols for format-time.

This package provides:
- Data models (immutable dataclasses)
- Protocol definitions (structural subtyping interfaces)
- Type aliases (PEP 695 modern syntax)
"""

from format_time.types.aliases import (
    AmPm,
    Iso8601Format,
    Iso8601Round,
    TimeFormatter,
)
from format_time.types.models import Time
from format_time.types.protocols import (
    HasHours,
    HasMinutes,
    HasSeconds,
    TimeLike,
)

__all__ = [
    # Type aliases
    "AmPm",
    "Iso8601Format",
    "Iso8601Round",
    "TimeFormatter",
    # Data models
    "Time",
    # Protocols
    "HasHours",
    "HasMinutes",
    "HasSeconds",
    "TimeLike",
]
