"""Data types shared by the Solanum threads."""

from .activity import (
    Activity,
    Draw,
    DrawCommand,
    Expired,
    InputIntent,
    Paused,
    Refresh,
    Running,
    TimerSnapshot,
    TimerStatus,
    percent_remaining,
)

__all__ = [
    "Activity",
    "Draw",
    "DrawCommand",
    "Expired",
    "InputIntent",
    "Paused",
    "Refresh",
    "Running",
    "TimerSnapshot",
    "TimerStatus",
    "percent_remaining",
]
