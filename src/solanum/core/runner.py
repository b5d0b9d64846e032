"""Wiring and shutdown of the session, input and rendering threads.

Two ways to stop have to end in the same place, with every thread joined and
the terminal restored:

* the user quits: the listener returns and closes its intent sender, the
  session sees the disconnect and returns, the draw channel closes and the
  renderer restores the terminal;
* something fails: the session raises, and the listener, blocked on the
  keyboard rather than on a channel, only stops because ``cancel`` is set.

``cancel`` is set whenever the session returns, so a renderer that died
first cannot leave the listener waiting for a key.
"""

from __future__ import annotations

import logging
import threading

from rich.console import Console

from solanum.core.channel import channel
from solanum.core.clock import Clock
from solanum.core.listener import InputListener
from solanum.core.session import SessionPolicy, SessionScheduler
from solanum.core.threads import WorkerThread
from solanum.models.config_models import AppConfig
from solanum.services.notification_service import Notifier
from solanum.ui.figlet import Font
from solanum.ui.keyboard import KeyboardHandler
from solanum.ui.renderer import PresentationSink

logger = logging.getLogger(__name__)


class SessionRunner:
    """Runs one session to completion on the calling thread."""

    def __init__(
        self,
        scheduler: SessionScheduler,
        listener: InputListener,
        sink: PresentationSink,
    ):
        self.scheduler = scheduler
        self.listener = listener
        self.sink = sink
        self.cancel = threading.Event()

    def run(self) -> None:
        """Run until the user quits.

        Ctrl-C counts as quitting, wherever it lands: the threads are always
        joined so the keyboard and the screen get restored.

        Raises:
            SolanumError: the first fatal error, after all threads are joined:
                the session's own, then the listener's, then the renderer's.
        """
        draw_tx, draw_rx = channel()
        intent_tx, intent_rx = channel()
        listener_thread = sink_thread = None

        try:
            listener_thread = self.listener.spawn(
                intent_tx, draw_tx.clone(), self.cancel
            )
            sink_thread = self.sink.spawn(draw_rx)
            self.scheduler.start(draw_tx, intent_rx)
        except KeyboardInterrupt:
            logger.info("interrupted")
        finally:
            self.cancel.set()
            intent_rx.close()
            draw_tx.close()
            if sink_thread is None:
                draw_rx.close()
            listener_error = _join(listener_thread)
            sink_error = _join(sink_thread)
            logger.debug("all threads joined")

        for error in (listener_error, sink_error):
            if error is not None:
                raise error


def _join(thread: WorkerThread | None) -> Exception | None:
    """Wait for ``thread`` even if Ctrl-C is pressed again meanwhile."""
    if thread is None:
        return None
    while True:
        try:
            return thread.join_error()
        except KeyboardInterrupt:
            logger.info("interrupted again, still waiting for %s", thread.name)


def build_runner(
    config: AppConfig,
    *,
    console: Console | None = None,
    keyboard: KeyboardHandler | None = None,
    clock: Clock | None = None,
) -> SessionRunner:
    """Assemble a runner from configuration.

    Raises:
        FontError: if the configured font cannot be loaded.
    """
    font = Font.from_flf(config.ui.font) if config.ui.font else Font.default()
    scheduler = SessionScheduler(
        SessionPolicy.from_config(config.session),
        render_duration=font.render_duration,
        notify=Notifier().notify,
        clock=clock,
    )
    listener = InputListener(keyboard or KeyboardHandler())
    sink = PresentationSink(config.ui, console=console)
    return SessionRunner(scheduler, listener, sink)

