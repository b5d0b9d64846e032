"""Duration parsing and formatting.

Durations are whole seconds. On the command line and in the configuration
file they are written as ``1h2m30s``: one or more number/unit groups whose
values are summed.
"""

import re

from solanum.errors import DurationParseError

_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}
_DURATION = re.compile(r"(?:\d+[hms])+")
_GROUP = re.compile(r"(\d+)([hms])")


def parse_duration(value: str) -> int:
    """Parse a duration such as ``25m`` or ``1h2m30s`` into seconds."""
    text = value.strip().lower()
    if not _DURATION.fullmatch(text):
        raise DurationParseError(
            f"unable to parse duration: `{value}` (expected e.g. `25m` or `1h2m30s`)"
        )
    return sum(int(amount) * _UNIT_SECONDS[unit] for amount, unit in _GROUP.findall(text))


def to_hms(seconds: int) -> tuple[int, int, int]:
    """Split seconds into hours, minutes and seconds."""
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return hours, minutes, seconds


def to_hhmmss(seconds: int) -> str:
    """Format seconds as ``HH:MM:SS``."""
    hours, minutes, secs = to_hms(seconds)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_duration(seconds: int) -> str:
    """Format seconds in the same ``_h_m_s`` notation that parse_duration reads."""
    hours, minutes, secs = to_hms(seconds)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if secs or not parts:
        parts.append(f"{secs}s")
    return "".join(parts)
