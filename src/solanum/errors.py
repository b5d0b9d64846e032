"""Exceptions raised by Solanum."""

from solanum.utils import exit_codes


class SolanumError(Exception):
    """Base exception for all Solanum errors.

    ``exit_code`` is the process exit status used when the error reaches the
    command line.
    """

    exit_code: int = exit_codes.ERROR_GENERAL


class DurationParseError(SolanumError, ValueError):
    """Raised when a duration string such as ``1h2m30s`` cannot be parsed."""

    exit_code = exit_codes.ERROR_INVALID_ARGS


class ConfigError(SolanumError):
    """Raised on a broken or invalid configuration."""

    exit_code = exit_codes.ERROR_CONFIG


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested configuration file does not exist."""

    def __init__(self, path):
        super().__init__(f"configuration file not found at `{path}`")
        self.path = path


class FontError(ConfigError):
    """Raised when a FIGlet font file is invalid or cannot render a character."""


class TerminalError(SolanumError):
    """Raised when the terminal cannot be set up, drawn on or restored."""

    exit_code = exit_codes.ERROR_TERMINAL


class RenderOverrun(SolanumError):
    """Raised when drawing a tick takes longer than the tick itself.

    Once this happens the displayed remaining time can no longer follow the
    wall clock, so the session is aborted.
    """

    exit_code = exit_codes.ERROR_RENDER_OVERRUN

    def __init__(self, elapsed: float):
        super().__init__(
            f"TUI rendering takes too long ({elapsed * 1000:.0f}ms for a 1000ms tick)"
        )
        self.elapsed = elapsed


class InputReadFailure(SolanumError):
    """Raised when the raw input source can no longer be read."""

    exit_code = exit_codes.ERROR_INPUT


class ChannelDisconnected(SolanumError):
    """Raised when the other end of a channel is gone."""


class NotifyFailure(SolanumError):
    """Raised when a desktop notification could not be delivered."""
