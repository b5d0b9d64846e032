"""Input listener: turns key presses into intents for the session."""

from __future__ import annotations

import logging
import threading

from solanum.core.channel import Sender
from solanum.core.threads import WorkerThread
from solanum.errors import ChannelDisconnected
from solanum.models.activity import DrawCommand, InputIntent, Refresh
from solanum.ui.keyboard import KeyboardHandler, KeyEvent, RedrawEvent

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.1

PAUSE_KEYS = frozenset({"p", " "})
SKIP_KEYS = frozenset({"s"})
QUIT_KEYS = frozenset({"q"})


def classify_key(event: KeyEvent) -> InputIntent | None:
    """Map a plain key press to an intent; modified or unknown keys map to None."""
    if event.modified:
        return None
    if event.key in PAUSE_KEYS:
        return InputIntent.TOGGLE_PAUSE
    if event.key in SKIP_KEYS:
        return InputIntent.SKIP
    if event.key in QUIT_KEYS:
        return InputIntent.QUIT
    return None


class InputListener:
    """Reads the keyboard on its own thread.

    Quit is never sent: the listener just returns, and closing its intent
    sender is what tells the session to stop. Between reads it polls
    ``cancel`` so the runner can stop it while it waits on the keyboard.
    """

    def __init__(
        self,
        keyboard: KeyboardHandler,
        *,
        poll_interval: float = POLL_INTERVAL_SECONDS,
    ):
        self._keyboard = keyboard
        self._poll_interval = poll_interval

    def spawn(
        self,
        intent_tx: Sender[InputIntent],
        refresh_tx: Sender[DrawCommand],
        cancel: threading.Event,
    ) -> WorkerThread:
        thread = WorkerThread(
            self.run, intent_tx, refresh_tx, cancel, name="input-listener"
        )
        thread.start()
        return thread

    def run(
        self,
        intent_tx: Sender[InputIntent],
        refresh_tx: Sender[DrawCommand],
        cancel: threading.Event,
    ) -> None:
        """Listen until quit, cancellation or a disconnected session.

        Raises:
            InputReadFailure: if the keyboard cannot be read.
        """
        try:
            with self._keyboard:
                self._listen(intent_tx, refresh_tx, cancel)
        finally:
            intent_tx.close()
            refresh_tx.close()

    def _listen(self, intent_tx, refresh_tx, cancel) -> None:
        while not cancel.is_set():
            event = self._keyboard.read_event(self._poll_interval)
            if event is None or cancel.is_set():
                continue

            if isinstance(event, RedrawEvent):
                try:
                    refresh_tx.send(Refresh())
                except ChannelDisconnected:
                    logger.debug("refresh dropped: renderer is gone")
                continue

            intent = classify_key(event)
            if intent is None:
                continue
            if intent is InputIntent.QUIT:
                logger.info("quit requested")
                return
            try:
                intent_tx.send(intent)
            except ChannelDisconnected:
                logger.debug("session is gone, listener exiting")
                return
        logger.info("listener cancelled")
