"""
Jittered interval ticker

An asyncio timer that fires repeatedly, each time after

    base * (U + factor)        U ~ uniform [0, 1), sampled per tick

so that independent senders started together drift apart instead of
firing in lockstep.

The ticker keeps exactly one pending deadline. It has no cancellation of
its own: the owner races tick() against its own stop signal and simply
stops awaiting. A tick() cancelled mid-wait leaves the deadline untouched,
so the next call still fires on schedule.

Example:
    ticker = JitterInterval(Duration.from_millis(500), factor=0.5)
    async for fired_at in ticker:
        print(fired_at)
"""

import asyncio
import math
import random
import time
from typing import Optional

from ..models.duration import Duration
from .log import LOG


class JitterInterval:
    """
    Repeating timer with a freshly jittered delay before every tick

    Args:
        base_duration: Nominal interval between ticks
        factor: Offset added to each uniform sample; must be finite and >= 0
        rng: Random source for the jitter samples; a new unseeded
             generator is used when omitted
    """

    def __init__(
        self,
        base_duration: Duration,
        factor: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        if not math.isfinite(factor) or factor < 0:
            raise ValueError(f"jitter factor must be finite and >= 0: {factor}")
        # Largest possible delay; raises ValueError if it cannot be represented
        base_duration.scale(1 + factor)
        self.base_duration = base_duration
        self.factor = factor
        self.rng = rng if rng is not None else random.Random()
        self.deadline = time.monotonic() + self.next_delay().total_seconds()
        LOG(f"Ticker every {base_duration} with jitter factor {factor}", level=2)

    def next_delay(self) -> Duration:
        """Draw one jitter sample and return the resulting delay"""
        return self.base_duration.scale(self.rng.random() + self.factor)

    async def tick(self) -> float:
        """
        Wait for the pending deadline, then schedule the next one

        Returns:
            The monotonic time (seconds) at which the tick fired
        """
        delay = self.deadline - time.monotonic()
        if delay > 0:
            await asyncio.sleep(delay)

        now = time.monotonic()
        upcoming = self.next_delay()
        self.deadline = now + upcoming.total_seconds()
        LOG(f"Tick at {now:.6f}, next in {upcoming}", level=3)
        return now

    def __aiter__(self) -> "JitterInterval":
        return self

    async def __anext__(self) -> float:
        return await self.tick()
