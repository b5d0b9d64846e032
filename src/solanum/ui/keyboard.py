"""Raw keyboard input handler for timer controls."""

from __future__ import annotations

import logging
import os
import select
import shutil
import sys
import termios
import tty
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from solanum.errors import InputReadFailure

logger = logging.getLogger(__name__)

_ESC = "\x1b"
_CTRL_L = "\x0c"
_DEL = "\x7f"
_READ_SIZE = 64


@dataclass(frozen=True)
class KeyEvent:
    """A key press. ``modified`` is set for Shift, Ctrl and Alt combinations."""

    key: str
    modified: bool = False


@dataclass(frozen=True)
class RedrawEvent:
    """The screen needs repainting: the terminal was resized or Ctrl-L pressed."""


InputEvent = KeyEvent | RedrawEvent


def decode_keys(data: bytes) -> list[InputEvent]:
    """Split one read from the terminal into events.

    A chunk starting with ESC is a single escape sequence (arrow keys,
    function keys, Alt+key) and counts as one modified key.
    """
    text = data.decode("utf-8", errors="ignore")
    if not text:
        return []
    if text.startswith(_ESC):
        return [KeyEvent(text, modified=True)]

    events: list[InputEvent] = []
    for char in text:
        if char == _CTRL_L:
            events.append(RedrawEvent())
        elif char.isupper():
            events.append(KeyEvent(char.lower(), modified=True))
        elif char < " " or char == _DEL:
            events.append(KeyEvent(char, modified=True))
        else:
            events.append(KeyEvent(char))
    return events


class KeyboardHandler:
    """Reads key presses and resizes from the terminal.

    ``start`` puts the terminal in cbreak mode so keys arrive without Enter;
    ``stop`` restores the previous settings. Terminal size is sampled on every
    read so a resize shows up as a ``RedrawEvent``.
    """

    def __init__(
        self,
        fd: int | None = None,
        terminal_size: Callable[[], os.terminal_size] = shutil.get_terminal_size,
    ):
        self.fd = sys.stdin.fileno() if fd is None else fd
        self.old_settings = None
        self._terminal_size = terminal_size
        self._last_size = None
        self._pending: deque[InputEvent] = deque()

    def start(self) -> None:
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error as exc:
            # Not a TTY: input still works, just line buffered.
            logger.warning("keyboard is not a terminal: %s", exc)
            self.old_settings = None
        self._last_size = self._terminal_size()

    def read_event(self, timeout: float) -> InputEvent | None:
        """Return the next input event, or None if nothing came within ``timeout``.

        Raises:
            InputReadFailure: if the input source errors out or is closed.
        """
        if self._pending:
            return self._pending.popleft()

        size = self._terminal_size()
        if size != self._last_size:
            self._last_size = size
            return RedrawEvent()

        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return None
            data = os.read(self.fd, _READ_SIZE)
        except OSError as exc:
            raise InputReadFailure(f"unable to read keyboard input: {exc}") from exc

        if not data:
            raise InputReadFailure("keyboard input was closed")

        self._pending.extend(decode_keys(data))
        return self._pending.popleft() if self._pending else None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
        except termios.error as exc:
            logger.error("unable to restore keyboard settings: %s", exc)
        self.old_settings = None

    def __enter__(self) -> KeyboardHandler:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
