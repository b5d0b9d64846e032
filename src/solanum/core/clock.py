"""Time source for pacing ticks."""

import time
from typing import Protocol


class Clock(Protocol):
    def monotonic(self) -> float:
        """Return a monotonic instant in seconds."""
        ...


class MonotonicClock:
    """Clock backed by ``time.monotonic``."""

    def monotonic(self) -> float:
        return time.monotonic()
