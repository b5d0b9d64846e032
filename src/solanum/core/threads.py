"""Worker threads whose failure is collected at join time."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class WorkerThread(threading.Thread):
    """Thread that keeps the exception its target raised.

    ``join_error`` waits for the thread and returns that exception (or None)
    so a single join point can decide what to report.
    """

    def __init__(self, target: Callable[..., None], *args, name: str):
        super().__init__(name=name, daemon=True)
        self._work = target
        self._work_args = args
        self.error: Exception | None = None

    def run(self) -> None:
        logger.debug("%s started", self.name)
        try:
            self._work(*self._work_args)
        except Exception as exc:
            logger.exception("%s failed", self.name)
            self.error = exc
        else:
            logger.debug("%s finished", self.name)

    def join_error(self, timeout: float | None = None) -> Exception | None:
        self.join(timeout)
        return self.error
