"""Tests for exit codes."""

from __future__ import annotations

import pytest

from solanum import errors
from solanum.utils import exit_codes


def test_codes_are_distinct():
    codes = [
        exit_codes.SUCCESS,
        exit_codes.ERROR_GENERAL,
        exit_codes.ERROR_INVALID_ARGS,
        exit_codes.ERROR_CONFIG,
        exit_codes.ERROR_TERMINAL,
        exit_codes.ERROR_RENDER_OVERRUN,
        exit_codes.ERROR_INPUT,
    ]
    assert len(set(codes)) == len(codes)


def test_names_and_descriptions():
    assert exit_codes.get_exit_code_name(exit_codes.ERROR_CONFIG) == "ERROR_CONFIG"
    assert exit_codes.get_exit_code_name(42) == "UNKNOWN(42)"
    assert "TTY" in exit_codes.get_exit_code_description(exit_codes.ERROR_TERMINAL)
    assert exit_codes.get_exit_code_description(42) == "Unknown error"


@pytest.mark.parametrize(
    "error, code",
    [
        (errors.DurationParseError("x"), exit_codes.ERROR_INVALID_ARGS),
        (errors.ConfigNotFoundError("/tmp/x.toml"), exit_codes.ERROR_CONFIG),
        (errors.FontError("x"), exit_codes.ERROR_CONFIG),
        (errors.TerminalError("x"), exit_codes.ERROR_TERMINAL),
        (errors.RenderOverrun(1.5), exit_codes.ERROR_RENDER_OVERRUN),
        (errors.InputReadFailure("x"), exit_codes.ERROR_INPUT),
        (errors.SolanumError("x"), exit_codes.ERROR_GENERAL),
    ],
)
def test_errors_carry_exit_codes(error, code):
    assert error.exit_code == code
