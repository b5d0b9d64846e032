"""Full-screen timer UI."""

from __future__ import annotations

import logging

from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.layout import Layout
from rich.live import Live
from rich.progress_bar import ProgressBar
from rich.text import Text

from solanum.core.channel import Receiver
from solanum.core.threads import WorkerThread
from solanum.errors import TerminalError
from solanum.models.activity import (
    Draw,
    DrawCommand,
    Expired,
    Paused,
    Running,
    TimerSnapshot,
)
from solanum.models.config_models import UIConfig

logger = logging.getLogger(__name__)

_COLOR_FIELDS = {
    "pomodoro": "pomodoro_color",
    "short_break": "short_break_color",
    "long_break": "long_break_color",
}


class PresentationSink:
    """Draws whatever the session sends, on its own thread.

    The sink owns the terminal screen: it enters the alternate screen in
    ``spawn`` and always leaves it when its command stream ends. The current
    screen and the last snapshot belong to the sink thread alone.
    """

    def __init__(self, options: UIConfig | None = None, console: Console | None = None):
        self.options = options or UIConfig()
        self.console = console or Console()
        self.screen = "running"
        self.snapshot: TimerSnapshot | None = None

    def spawn(self, draw_rx: Receiver[DrawCommand]) -> WorkerThread:
        """Set up the terminal, then start consuming ``draw_rx``.

        Raises:
            TerminalError: if the terminal cannot be set up. No thread is
                started in that case.
        """
        live = self._setup_terminal()
        try:
            thread = WorkerThread(self.run, live, draw_rx, name="presentation-sink")
            thread.start()
        except BaseException:
            self._restore_terminal(live)
            raise
        return thread

    def run(self, live: Live, draw_rx: Receiver[DrawCommand]) -> None:
        try:
            for command in draw_rx:
                self.apply(command)
                try:
                    live.update(self.render(), refresh=True)
                except OSError as exc:
                    raise TerminalError(f"terminal error: {exc}") from exc
        finally:
            draw_rx.close()
            self._restore_terminal(live)

    def apply(self, command: DrawCommand) -> None:
        """Update the current screen from a command; Refresh keeps it."""
        if not isinstance(command, Draw):
            return
        status = command.status
        if isinstance(status, Running):
            self.snapshot = status.snapshot
            self.screen = "running"
        elif isinstance(status, Paused):
            self.screen = "paused"
        elif isinstance(status, Expired):
            self.screen = "expired"

    def render(self) -> RenderableType:
        if self.screen == "expired":
            return self._render_expired()
        if self.snapshot is None:
            return Text("")
        return self._render_timer(self.snapshot, paused=self.screen == "paused")

    def _render_timer(self, snapshot: TimerSnapshot, paused: bool) -> Layout:
        color = self.options.rich_color(_COLOR_FIELDS[snapshot.activity.kind])
        background = self.options.rich_color("background_color")

        layout = Layout()
        layout.split_column(
            Layout(name="header", ratio=20),
            Layout(name="timer", ratio=35),
            Layout(name="progress", ratio=25),
            Layout(name="footer", ratio=20),
        )

        if paused:
            header = Text("PAUSED", style="bold yellow", justify="center")
            layout["header"].update(Align.center(header, vertical="middle"))

        timer_text = Text(snapshot.text, style=f"bold {color}")
        layout["timer"].update(Align.center(timer_text, vertical="middle"))

        title = Text(str(snapshot.activity), style="bold")
        bar = ProgressBar(
            total=100,
            completed=snapshot.percent,
            complete_style=color,
            finished_style=color,
            style=background,
        )
        layout["progress"].update(Group(title, bar))

        layout["footer"].update(
            Align.center(self._footer_text(paused), vertical="bottom")
        )
        return layout

    def _render_expired(self) -> Layout:
        layout = Layout()
        layout.split_column(
            Layout(name="top", ratio=45),
            Layout(name="message", ratio=10),
            Layout(name="bottom", ratio=45),
        )
        message = Group(
            Text("Timer expired", style="bold", justify="center"),
            Text("Press any key to continue", style="dim", justify="center"),
        )
        layout["message"].update(message)
        return layout

    def _footer_text(self, paused: bool) -> Text:
        """Create footer with keyboard hints."""
        if paused:
            hints = "Press 'p' to resume  •  's' to skip  •  'q' to quit"
        else:
            hints = "Press 'p' to pause  •  's' to skip  •  'q' to quit"
        return Text(hints, style="dim", justify="center")

    def _setup_terminal(self) -> Live:
        live = Live(
            Text(""),
            console=self.console,
            screen=True,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        try:
            live.start()
        except OSError as exc:
            raise TerminalError(f"terminal error: {exc}") from exc
        logger.debug("terminal set up")
        return live

    def _restore_terminal(self, live: Live) -> None:
        try:
            live.stop()
        except OSError as exc:
            raise TerminalError(f"unable to restore terminal: {exc}") from exc
        logger.debug("terminal restored")
