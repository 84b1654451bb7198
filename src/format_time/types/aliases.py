"""Type aliases using modern PEP 695 syntax."""

from collections.abc import Callable
from typing import Literal

from format_time.types.protocols import TimeLike

# A formatter renders a time value (or the part of it it reads) as text
type TimeFormatter = Callable[[TimeLike], str]

type AmPm = Literal["AM", "PM"]

# ISO 8601 option values
type Iso8601Format = Literal["basic", "extended"]
type Iso8601Round = Literal["none", "seconds", "ms"]
