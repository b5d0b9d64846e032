"""Typed FIFO channels with disconnect semantics.

``queue.Queue`` has no notion of the other side going away, which is how the
threads here learn that a peer has stopped. A channel tracks its live senders
and its receiver: once every sender is closed the receiver drains what is left
and then raises ``ChannelDisconnected``; once the receiver is closed every
``send`` raises it.
"""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from solanum.errors import ChannelDisconnected

T = TypeVar("T")


class RecvTimeout(Exception):
    """Raised by ``Receiver.recv`` when nothing arrived within the timeout."""


class _Channel(Generic[T]):
    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.not_empty = threading.Condition(self.lock)
        self.items: deque[T] = deque()
        self.senders = 1
        self.receiver_open = True


class Sender(Generic[T]):
    """Producing end of a channel. Clone it to add producers."""

    def __init__(self, channel: _Channel[T]):
        self._channel = channel
        self._closed = False

    def send(self, item: T) -> None:
        channel = self._channel
        with channel.lock:
            if self._closed:
                raise ValueError("send on a closed sender")
            if not channel.receiver_open:
                raise ChannelDisconnected("receiver is gone")
            channel.items.append(item)
            channel.not_empty.notify()

    def clone(self) -> Sender[T]:
        channel = self._channel
        with channel.lock:
            if self._closed:
                raise ValueError("clone of a closed sender")
            channel.senders += 1
        return Sender(channel)

    def close(self) -> None:
        """Drop this producer. Closing twice is a no-op."""
        channel = self._channel
        with channel.lock:
            if self._closed:
                return
            self._closed = True
            channel.senders -= 1
            if channel.senders == 0:
                channel.not_empty.notify_all()

    def __enter__(self) -> Sender[T]:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Receiver(Generic[T]):
    """Consuming end of a channel."""

    def __init__(self, channel: _Channel[T]):
        self._channel = channel

    def recv(self, timeout: float | None = None) -> T:
        """Return the next item, waiting at most ``timeout`` seconds.

        Raises:
            RecvTimeout: if ``timeout`` elapsed with nothing to receive.
            ChannelDisconnected: if the channel is empty and has no senders left.
        """
        channel = self._channel
        deadline = None if timeout is None else time.monotonic() + timeout
        with channel.lock:
            while not channel.items:
                if channel.senders == 0 or not channel.receiver_open:
                    raise ChannelDisconnected("all senders are gone")
                if deadline is None:
                    channel.not_empty.wait()
                    continue
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise RecvTimeout
                channel.not_empty.wait(remaining)
            return channel.items.popleft()

    def close(self) -> None:
        """Stop receiving: pending items are dropped and senders see a disconnect."""
        channel = self._channel
        with channel.lock:
            channel.receiver_open = False
            channel.items.clear()
            channel.not_empty.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.recv()
            except ChannelDisconnected:
                return


def channel() -> tuple[Sender[T], Receiver[T]]:
    """Create a channel and return its first sender and its receiver."""
    state: _Channel[T] = _Channel()
    return Sender(state), Receiver(state)
