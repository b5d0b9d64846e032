"""Tests for the countdown timer."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from fakes import DISCONNECT, TICK, FakeClock, RecordingSender, ScriptedReceiver
from solanum.core.timer import EXPIRED_WINDOW_SECONDS, TICK_SECONDS, CountdownTimer
from solanum.errors import NotifyFailure, RenderOverrun
from solanum.models.activity import (
    Activity,
    Draw,
    Expired,
    InputIntent,
    Paused,
    Running,
)

POMODORO = Activity.pomodoro(1)


def describe(sent):
    """Summarise draw commands as residual seconds, 'paused' or 'expired'."""
    out = []
    for command in sent:
        status = command.status
        if isinstance(status, Running):
            out.append(int(status.snapshot.text))
        elif isinstance(status, Paused):
            out.append("paused")
        elif isinstance(status, Expired):
            out.append("expired")
    return out


@pytest.fixture()
def notify():
    return MagicMock()


@pytest.fixture()
def make_timer(clock, notify):
    def _make(total, **kwargs):
        kwargs.setdefault("clock", clock)
        return CountdownTimer(total, render_duration=str, notify=notify, **kwargs)

    return _make


# ---------------------------------------------------------------------------
# Construction and snapshots
# ---------------------------------------------------------------------------


class TestSnapshot:
    def test_rejects_non_positive_total(self, notify):
        with pytest.raises(ValueError):
            CountdownTimer(0, render_duration=str, notify=notify)

    def test_fresh_timer_is_full(self, make_timer):
        snap = make_timer(10).snapshot(POMODORO)
        assert snap.activity == POMODORO
        assert snap.text == "10"
        assert snap.percent == 100

    def test_percent_follows_residual(self, make_timer):
        timer = make_timer(3)
        timer.residual = 1
        assert timer.snapshot(POMODORO).percent == 33

    def test_text_comes_from_render_duration(self, notify):
        timer = CountdownTimer(
            90, render_duration=lambda s: f"<{s}>", notify=notify
        )
        assert timer.snapshot(POMODORO).text == "<90>"


# ---------------------------------------------------------------------------
# Counting down
# ---------------------------------------------------------------------------


class TestRunToExpiry:
    def test_emits_one_snapshot_per_second_then_expired(self, make_timer, clock, notify):
        timer = make_timer(5)
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver([TICK] * 6, clock)

        assert timer.run(POMODORO, draw_tx, intent_rx) is False
        assert describe(draw_tx.sent) == [5, 4, 3, 2, 1, "expired"]
        notify.assert_called_once_with(POMODORO)

    def test_all_commands_are_draws(self, make_timer, clock):
        draw_tx = RecordingSender()
        make_timer(2).run(POMODORO, draw_tx, ScriptedReceiver([TICK] * 3, clock))
        assert all(isinstance(command, Draw) for command in draw_tx.sent)

    def test_percent_is_non_increasing(self, make_timer, clock):
        draw_tx = RecordingSender()
        make_timer(7).run(POMODORO, draw_tx, ScriptedReceiver([TICK] * 8, clock))
        percents = [
            c.status.snapshot.percent for c in draw_tx.sent if isinstance(c.status, Running)
        ]
        assert percents == sorted(percents, reverse=True)
        assert all(0 <= p <= 100 for p in percents)

    def test_residual_resets_after_expiry(self, make_timer, clock):
        timer = make_timer(3)
        timer.run(POMODORO, RecordingSender(), ScriptedReceiver([TICK] * 4, clock))
        assert timer.residual == 3

    def test_reused_timer_counts_from_full_again(self, make_timer, clock):
        timer = make_timer(2)
        first, second = RecordingSender(), RecordingSender()
        timer.run(POMODORO, first, ScriptedReceiver([TICK] * 3, clock))
        timer.run(POMODORO, second, ScriptedReceiver([TICK] * 3, clock))
        assert describe(first.sent) == describe(second.sent) == [2, 1, "expired"]

    def test_tick_wait_uses_remaining_budget(self, make_timer):
        clock = FakeClock()
        draw_tx = RecordingSender(on_send=lambda _: clock.advance(0.25))
        intent_rx = ScriptedReceiver([TICK] * 2, clock)

        make_timer(1, clock=clock).run(POMODORO, draw_tx, intent_rx)

        assert intent_rx.timeouts[0] == pytest.approx(TICK_SECONDS - 0.25)
        assert intent_rx.timeouts[1] == EXPIRED_WINDOW_SECONDS


class TestSkip:
    def test_skip_goes_straight_to_expiry(self, make_timer, clock, notify):
        timer = make_timer(10)
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver([TICK] * 7 + [InputIntent.SKIP, TICK], clock)

        assert timer.run(POMODORO, draw_tx, intent_rx) is False
        assert describe(draw_tx.sent) == [10, 9, 8, 7, 6, 5, 4, 3, "expired"]
        notify.assert_called_once_with(POMODORO)
        assert timer.residual == 10

    def test_quit_intent_is_ignored(self, make_timer, clock):
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver([InputIntent.QUIT, TICK, TICK, TICK], clock)
        make_timer(2).run(POMODORO, draw_tx, intent_rx)
        # The tick is re-emitted but not consumed.
        assert describe(draw_tx.sent) == [2, 2, 1, "expired"]


class TestPause:
    def test_pause_and_resume_keep_residual(self, make_timer, clock):
        timer = make_timer(3)
        draw_tx = RecordingSender()
        script = [
            TICK,
            InputIntent.TOGGLE_PAUSE,
            InputIntent.TOGGLE_PAUSE,
            TICK,
            TICK,
            TICK,
        ]
        intent_rx = ScriptedReceiver(script, clock)

        assert timer.run(POMODORO, draw_tx, intent_rx) is False
        assert describe(draw_tx.sent) == [3, 2, "paused", 2, 1, "expired"]

    def test_paused_wait_is_unbounded(self, make_timer, clock):
        intent_rx = ScriptedReceiver(
            [InputIntent.TOGGLE_PAUSE, InputIntent.TOGGLE_PAUSE, TICK, TICK], clock
        )
        make_timer(1).run(POMODORO, RecordingSender(), intent_rx)
        assert intent_rx.timeouts[1] is None

    def test_skip_while_paused_expires(self, make_timer, clock, notify):
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver(
            [InputIntent.TOGGLE_PAUSE, InputIntent.SKIP, TICK], clock
        )
        assert make_timer(5).run(POMODORO, draw_tx, intent_rx) is False
        assert describe(draw_tx.sent) == [5, "paused", "expired"]
        notify.assert_called_once()

    def test_other_intent_while_paused_resumes(self, make_timer, clock):
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver(
            [InputIntent.TOGGLE_PAUSE, InputIntent.QUIT, TICK, TICK], clock
        )
        make_timer(1).run(POMODORO, draw_tx, intent_rx)
        assert describe(draw_tx.sent) == [1, "paused", 1, "expired"]


# ---------------------------------------------------------------------------
# Expiry window
# ---------------------------------------------------------------------------


class TestExpiry:
    def test_any_intent_ends_window_early(self, make_timer, clock):
        intent_rx = ScriptedReceiver([TICK, InputIntent.TOGGLE_PAUSE], clock)
        assert make_timer(1).run(POMODORO, RecordingSender(), intent_rx) is False
        assert intent_rx.script == []

    def test_disconnect_during_window_terminates(self, make_timer, clock, notify):
        timer = make_timer(1)
        intent_rx = ScriptedReceiver([TICK, DISCONNECT], clock)
        assert timer.run(POMODORO, RecordingSender(), intent_rx) is True
        notify.assert_called_once()
        assert timer.residual == 1

    def test_notify_failure_is_not_fatal(self, make_timer, clock, notify):
        notify.side_effect = NotifyFailure("no notification daemon")
        draw_tx = RecordingSender()
        assert make_timer(1).run(POMODORO, draw_tx, ScriptedReceiver([TICK, TICK], clock)) is False
        assert describe(draw_tx.sent) == [1, "expired"]


# ---------------------------------------------------------------------------
# Termination and failure
# ---------------------------------------------------------------------------


class TestTermination:
    def test_disconnect_while_counting_skips_expiry(self, make_timer, clock, notify):
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver([TICK, DISCONNECT], clock)
        assert make_timer(5).run(POMODORO, draw_tx, intent_rx) is True
        assert describe(draw_tx.sent) == [5, 4]
        notify.assert_not_called()

    def test_disconnect_while_paused_terminates_without_notify(
        self, make_timer, clock, notify
    ):
        draw_tx = RecordingSender()
        intent_rx = ScriptedReceiver([InputIntent.TOGGLE_PAUSE], clock)
        assert make_timer(5).run(POMODORO, draw_tx, intent_rx) is True
        assert describe(draw_tx.sent) == [5, "paused"]
        notify.assert_not_called()

    def test_gone_renderer_terminates(self, make_timer, clock, notify):
        draw_tx = RecordingSender(disconnected=True)
        assert make_timer(5).run(POMODORO, draw_tx, ScriptedReceiver([TICK], clock)) is True
        notify.assert_not_called()

    def test_slow_render_raises_overrun(self, make_timer):
        clock = FakeClock()
        draw_tx = RecordingSender(on_send=lambda _: clock.advance(1.2))
        intent_rx = ScriptedReceiver([TICK] * 5, clock)

        with pytest.raises(RenderOverrun) as excinfo:
            make_timer(5, clock=clock).run(POMODORO, draw_tx, intent_rx)

        assert excinfo.value.elapsed == pytest.approx(1.2)
        assert "1200ms" in str(excinfo.value)
        assert intent_rx.timeouts == []

    def test_render_using_exactly_one_tick_overruns(self, make_timer):
        clock = FakeClock()
        draw_tx = RecordingSender(on_send=lambda _: clock.advance(TICK_SECONDS))
        with pytest.raises(RenderOverrun):
            make_timer(5, clock=clock).run(POMODORO, draw_tx, ScriptedReceiver([TICK]))
