"""Tests for WorkerThread."""

from __future__ import annotations

from solanum.core.threads import WorkerThread
from solanum.errors import InputReadFailure


def test_passes_arguments_to_target():
    seen = []
    thread = WorkerThread(lambda a, b: seen.append((a, b)), 1, 2, name="worker")
    thread.start()
    assert thread.join_error() is None
    assert seen == [(1, 2)]


def test_collects_target_exception():
    def fail():
        raise InputReadFailure("keyboard input was closed")

    thread = WorkerThread(fail, name="worker")
    thread.start()
    error = thread.join_error()
    assert isinstance(error, InputReadFailure)
    assert thread.error is error


def test_is_daemon_and_named():
    thread = WorkerThread(lambda: None, name="input-listener")
    assert thread.daemon
    assert thread.name == "input-listener"
