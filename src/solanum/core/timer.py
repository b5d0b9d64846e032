"""Countdown timer for a single interval."""

from __future__ import annotations

import logging
from collections.abc import Callable

from solanum.core.channel import Receiver, RecvTimeout, Sender
from solanum.core.clock import Clock, MonotonicClock
from solanum.errors import ChannelDisconnected, NotifyFailure, RenderOverrun
from solanum.models.activity import (
    Activity,
    Draw,
    DrawCommand,
    Expired,
    InputIntent,
    Paused,
    Running,
    TimerSnapshot,
    percent_remaining,
)

logger = logging.getLogger(__name__)

TICK_SECONDS = 1.0
EXPIRED_WINDOW_SECONDS = 5.0


class CountdownTimer:
    """Counts one interval down, one second per tick.

    A timer is created once per kind of interval and reused: after every
    expiry the residual is reset to the total.

    Args:
        total: Interval length in seconds.
        render_duration: Turns the residual seconds into the (ASCII art) text
            shown on screen.
        notify: Called with the activity when the interval expires. May raise
            ``NotifyFailure``, which is logged and ignored.
        clock: Monotonic time source used to measure how long a tick took.
    """

    def __init__(
        self,
        total: int,
        *,
        render_duration: Callable[[int], str],
        notify: Callable[[Activity], None],
        clock: Clock | None = None,
    ):
        if total <= 0:
            raise ValueError("total must be greater than zero")
        self.total = total
        self.residual = total
        self._render_duration = render_duration
        self._notify = notify
        self._clock = clock or MonotonicClock()

    def snapshot(self, activity: Activity) -> TimerSnapshot:
        return TimerSnapshot(
            activity=activity,
            text=self._render_duration(self.residual),
            percent=percent_remaining(self.residual, self.total),
        )

    def run(
        self,
        activity: Activity,
        draw_tx: Sender[DrawCommand],
        intent_rx: Receiver[InputIntent],
    ) -> bool:
        """Run the interval to expiry.

        Returns True when the session must terminate, i.e. a peer channel
        disconnected.

        Raises:
            RenderOverrun: if emitting a tick used up the whole tick period.
        """
        try:
            self._count_down(activity, draw_tx, intent_rx)
            return self._expire(activity, draw_tx, intent_rx)
        except ChannelDisconnected:
            logger.debug("%s: peer disconnected, terminating", activity)
            return True

    def _count_down(self, activity, draw_tx, intent_rx) -> None:
        """Tick until the residual runs out or the user skips."""
        while self.residual > 0:
            tick_start = self._clock.monotonic()
            draw_tx.send(Draw(Running(self.snapshot(activity))))

            elapsed = self._clock.monotonic() - tick_start
            budget = TICK_SECONDS - elapsed
            if budget <= 0:
                raise RenderOverrun(elapsed)

            try:
                intent = intent_rx.recv(timeout=budget)
            except RecvTimeout:
                self.residual -= 1
                continue

            if intent is InputIntent.TOGGLE_PAUSE:
                logger.info("%s paused at %ds", activity, self.residual)
                draw_tx.send(Draw(Paused()))
                intent = intent_rx.recv()
                if intent is InputIntent.TOGGLE_PAUSE:
                    logger.info("%s resumed", activity)
                    continue

            if intent is InputIntent.SKIP:
                logger.info("%s skipped at %ds", activity, self.residual)
                break

    def _expire(self, activity, draw_tx, intent_rx) -> bool:
        terminate = False
        try:
            self._notify(activity)
        except NotifyFailure as exc:
            logger.warning("notification for %s failed: %s", activity, exc)

        draw_tx.send(Draw(Expired()))
        try:
            intent_rx.recv(timeout=EXPIRED_WINDOW_SECONDS)
        except RecvTimeout:
            pass
        except ChannelDisconnected:
            terminate = True

        self.residual = self.total
        return terminate
