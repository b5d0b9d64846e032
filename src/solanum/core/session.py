"""Pomodoro session: the endless sequence of pomodoros and breaks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from solanum.core.channel import Receiver, Sender
from solanum.core.clock import Clock
from solanum.core.timer import CountdownTimer
from solanum.models.activity import Activity, DrawCommand, InputIntent
from solanum.models.config_models import SessionConfig
from solanum.models.duration import format_duration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionPolicy:
    """Interval lengths (seconds) and the long break cadence."""

    pomodoro_duration: int = 25 * 60
    short_break_duration: int = 5 * 60
    long_break_duration: int = 15 * 60
    pomodoros_before_long_break: int = 4

    def __post_init__(self) -> None:
        for name in (
            "pomodoro_duration",
            "short_break_duration",
            "long_break_duration",
            "pomodoros_before_long_break",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be greater than zero")

    @classmethod
    def from_config(cls, config: SessionConfig) -> SessionPolicy:
        return cls(
            pomodoro_duration=config.pomodoro,
            short_break_duration=config.short_break,
            long_break_duration=config.long_break,
            pomodoros_before_long_break=config.pomodoros,
        )

    def __str__(self) -> str:
        return (
            f"pomodoro {format_duration(self.pomodoro_duration)}, "
            f"short break {format_duration(self.short_break_duration)}, "
            f"long break {format_duration(self.long_break_duration)} "
            f"every {self.pomodoros_before_long_break} pomodoro(s)"
        )


class SessionScheduler:
    """Runs pomodoros, short breaks and long breaks until told to stop.

    ``pomodoro_count`` is the ordinal of the latest pomodoro; it is never
    reset, so ordinals keep growing across long breaks.
    """

    def __init__(
        self,
        policy: SessionPolicy,
        *,
        render_duration: Callable[[int], str],
        notify: Callable[[Activity], None],
        clock: Clock | None = None,
    ):
        self.policy = policy
        self.pomodoro_count = 0

        def make_timer(total: int) -> CountdownTimer:
            return CountdownTimer(
                total, render_duration=render_duration, notify=notify, clock=clock
            )

        self._pomodoro = make_timer(policy.pomodoro_duration)
        self._short_break = make_timer(policy.short_break_duration)
        self._long_break = make_timer(policy.long_break_duration)

    def start(
        self, draw_tx: Sender[DrawCommand], intent_rx: Receiver[InputIntent]
    ) -> None:
        """Run the session.

        Returns once termination is requested (a peer disconnected). There is
        no other way out: a session has no natural end.

        Raises:
            RenderOverrun: from any interval; not retried.
        """
        logger.info("session started: %s", self.policy)
        while True:
            while True:
                self.pomodoro_count += 1
                if self._pomodoro.run(
                    Activity.pomodoro(self.pomodoro_count), draw_tx, intent_rx
                ):
                    return self._stopped()
                if self.pomodoro_count % self.policy.pomodoros_before_long_break == 0:
                    break
                if self._short_break.run(Activity.short_break(), draw_tx, intent_rx):
                    return self._stopped()

            if self._long_break.run(Activity.long_break(), draw_tx, intent_rx):
                return self._stopped()

    def _stopped(self) -> None:
        logger.info("session stopped after %d pomodoro(s)", self.pomodoro_count)
