"""Messages exchanged between the session, input and rendering threads.

Every value here is immutable and is handed across thread boundaries by
reference to a frozen object, which is the same as passing a copy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

ActivityKind = Literal["pomodoro", "short_break", "long_break"]


@dataclass(frozen=True)
class Activity:
    """The interval currently being timed."""

    kind: ActivityKind
    ordinal: int | None = None  # pomodoros only

    @classmethod
    def pomodoro(cls, ordinal: int) -> Activity:
        if ordinal < 1:
            raise ValueError("pomodoro ordinal must be positive")
        return cls("pomodoro", ordinal)

    @classmethod
    def short_break(cls) -> Activity:
        return cls("short_break")

    @classmethod
    def long_break(cls) -> Activity:
        return cls("long_break")

    @property
    def is_pomodoro(self) -> bool:
        return self.kind == "pomodoro"

    def __str__(self) -> str:
        if self.kind == "pomodoro":
            return f"Pomodoro #{self.ordinal}"
        if self.kind == "short_break":
            return "Short break"
        return "Long break"


def percent_remaining(residual: int, total: int) -> int:
    """Return ``round(residual / total * 100)`` with halves rounded up."""
    if total <= 0:
        raise ValueError("total must be positive")
    residual = min(max(residual, 0), total)
    return (200 * residual + total) // (2 * total)


@dataclass(frozen=True)
class TimerSnapshot:
    """Progress of the running interval, as sent to the renderer each tick."""

    activity: Activity
    text: str  # multi-line ASCII art of the remaining time
    percent: int


@dataclass(frozen=True)
class Running:
    snapshot: TimerSnapshot


@dataclass(frozen=True)
class Paused:
    pass


@dataclass(frozen=True)
class Expired:
    pass


TimerStatus = Running | Paused | Expired


@dataclass(frozen=True)
class Draw:
    """Switch the renderer to ``status`` and draw it."""

    status: TimerStatus


@dataclass(frozen=True)
class Refresh:
    """Redraw the current screen, e.g. after a terminal resize."""


DrawCommand = Draw | Refresh


class InputIntent(Enum):
    """What a key press asks for."""

    TOGGLE_PAUSE = "toggle_pause"
    SKIP = "skip"
    QUIT = "quit"
