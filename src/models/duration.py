"""
Duration value model

A span of time held as an integer number of nanoseconds, the fixed
resolution of every duration barrage parses.
"""

import math
from dataclasses import dataclass

from .units import NANOS_PER_MICRO, NANOS_PER_MILLI, NANOS_PER_SEC, TimeUnit


@dataclass(frozen=True, order=True)
class Duration:
    """
    Non-negative span of time with nanosecond resolution

    Attributes:
        nanos: Total length in nanoseconds

    Example:
        >>> Duration.from_micros(1_000_000) == Duration.from_secs(1)
        True
    """
    nanos: int

    def __post_init__(self) -> None:
        if self.nanos < 0:
            raise ValueError(f"duration cannot be negative: {self.nanos}ns")

    @classmethod
    def from_secs(cls, amount: int) -> "Duration":
        return cls(amount * NANOS_PER_SEC)

    @classmethod
    def from_millis(cls, amount: int) -> "Duration":
        return cls(amount * NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, amount: int) -> "Duration":
        return cls(amount * NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, amount: int) -> "Duration":
        return cls(amount)

    @classmethod
    def from_unit(cls, amount: int, unit: TimeUnit) -> "Duration":
        """Build a duration of ``amount`` times ``unit``"""
        return cls(amount * unit.nanos)

    def total_seconds(self) -> float:
        return self.nanos / NANOS_PER_SEC

    def scale(self, factor: float) -> "Duration":
        """
        Multiply the duration by a non-negative finite factor

        The result is rounded to the nearest nanosecond.

        Raises:
            ValueError: if ``factor`` is negative, infinite or NaN, or the
                        product is too large to represent
        """
        if not math.isfinite(factor) or factor < 0:
            raise ValueError(f"cannot scale a duration by {factor}")
        try:
            scaled = self.nanos * factor
        except OverflowError as err:
            raise ValueError(f"cannot scale {self} by {factor}") from err
        if not math.isfinite(scaled):
            raise ValueError(f"cannot scale {self} by {factor}")
        return Duration(round(scaled))

    def __str__(self) -> str:
        for unit in (TimeUnit.SECONDS, TimeUnit.MILLISECONDS, TimeUnit.MICROSECONDS):
            if self.nanos and self.nanos % unit.nanos == 0:
                return f"{self.nanos // unit.nanos}{unit.value}"
        return f"{self.nanos}{TimeUnit.NANOSECONDS.value}"
