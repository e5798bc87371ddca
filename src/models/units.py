"""
Time unit metadata

Defines the unit suffixes recognised by the duration parser and the
order in which the parser tries them.
"""

from enum import Enum
from typing import Tuple


NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000


class TimeUnit(Enum):
    """
    Unit suffixes accepted after a duration magnitude

    The enum value is the literal suffix as written in input text.
    """
    SECONDS = "s"
    MILLISECONDS = "ms"
    NANOSECONDS = "ns"
    MICROSECONDS = "us"

    @property
    def nanos(self) -> int:
        """Number of nanoseconds in one of this unit"""
        return _NANOS_PER_UNIT[self]


_NANOS_PER_UNIT = {
    TimeUnit.SECONDS: NANOS_PER_SEC,
    TimeUnit.MILLISECONDS: NANOS_PER_MILLI,
    TimeUnit.MICROSECONDS: NANOS_PER_MICRO,
    TimeUnit.NANOSECONDS: 1,
}

# Order in which the duration parser tries suffixes; first match wins.
# None of these is a prefix of another, so the order is not load-bearing
# today. A unit that prefixes another must be listed after it.
DURATION_UNITS: Tuple[TimeUnit, ...] = (
    TimeUnit.SECONDS,
    TimeUnit.MILLISECONDS,
    TimeUnit.NANOSECONDS,
    TimeUnit.MICROSECONDS,
)
