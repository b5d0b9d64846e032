"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging

import pytest

from fakes import FakeClock


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep the application logger away from the real user log directory."""
    import solanum.utils.logger as logger_mod

    original = logger_mod._logger
    logger_mod._logger = logging.getLogger("solanum.tests")
    yield
    logger_mod._logger = original
