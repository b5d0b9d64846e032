"""Main entry point for Solanum."""

from pathlib import Path

import typer

from solanum import __version__
from solanum.commands.decorators import command_wrapper
from solanum.core.runner import build_runner
from solanum.errors import DurationParseError
from solanum.models.duration import parse_duration
from solanum.services.config_service import ConfigService
from solanum.utils.ui.console import get_console

app = typer.Typer(
    name="solanum",
    help="A pomodoro timer for the terminal",
    add_completion=False,
)


def _duration_option(value: str | None) -> int | None:
    """Parse a ``1h2m30s`` style option into seconds."""
    if value is None:
        return None
    try:
        seconds = parse_duration(value)
    except DurationParseError as e:
        raise typer.BadParameter(str(e)) from e
    if seconds <= 0:
        raise typer.BadParameter("duration must be greater than zero")
    return seconds


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"solanum {__version__}")
        raise typer.Exit()


@app.command()
@command_wrapper
def start(
    pomodoro: str | None = typer.Option(
        None,
        "--pomodoro",
        "-p",
        help="Pomodoro duration, e.g. 25m",
        callback=_duration_option,
    ),
    short_break: str | None = typer.Option(
        None,
        "--short-break",
        "-s",
        help="Short break duration, e.g. 5m",
        callback=_duration_option,
    ),
    long_break: str | None = typer.Option(
        None,
        "--long-break",
        "-l",
        help="Long break duration, e.g. 15m",
        callback=_duration_option,
    ),
    pomodoros: int | None = typer.Option(
        None, "--pomodoros", "-n", min=1, help="Pomodoros before a long break"
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Custom configuration file"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Start a pomodoro session.

    Keys: p or space to pause/resume, s to skip the current interval, q to quit.
    """
    config_service = ConfigService(config)
    app_config = config_service.apply_overrides(
        pomodoro=pomodoro,
        short_break=short_break,
        long_break=long_break,
        pomodoros=pomodoros,
    )
    build_runner(app_config).run()


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
