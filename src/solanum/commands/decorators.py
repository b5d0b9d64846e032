"""Decorators for command functions."""

import functools
import time
from collections.abc import Callable

import typer

from solanum.errors import SolanumError
from solanum.utils import exit_codes
from solanum.utils.logger import get_logger
from solanum.utils.ui.console import get_console


def format_error(message: str) -> None:
    """Print the single error line shown before a failing exit."""
    get_console(stderr=True).print(f"error: {message}", markup=False)


def command_wrapper(func: Callable) -> Callable:
    """Log the command and turn Solanum errors into an error line and exit code."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except SolanumError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s (%s: %s)",
                cmd,
                elapsed,
                str(e),
                exit_codes.get_exit_code_name(e.exit_code),
                exit_codes.get_exit_code_description(e.exit_code),
                exc_info=True,
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except typer.Exit:
            # Re-raise Typer's own exits (like --version)
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.exception("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            # Generic fallback for unexpected crashes
            format_error(f"an unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
