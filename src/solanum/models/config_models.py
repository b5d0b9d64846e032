"""Configuration models.

The configuration file mirrors these models one to one: a ``[session]``
table with the interval policy and a ``[ui]`` table with colors and font.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from solanum.models.duration import parse_duration
from solanum.utils.paths import expand_path

ColorName = Literal[
    "red",
    "black",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "gray",
    "darkgray",
    "lightred",
    "lightgreen",
    "lightyellow",
    "lightblue",
    "lightmagenta",
    "lightcyan",
]

# Configuration color names to rich color names.
RICH_COLORS: dict[str, str] = {
    "red": "red",
    "black": "black",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "gray": "white",
    "darkgray": "bright_black",
    "lightred": "bright_red",
    "lightgreen": "bright_green",
    "lightyellow": "bright_yellow",
    "lightblue": "bright_blue",
    "lightmagenta": "bright_magenta",
    "lightcyan": "bright_cyan",
}


class SessionConfig(BaseModel):
    """Interval policy. Durations are seconds."""

    model_config = {"extra": "forbid"}

    pomodoro: int = Field(default=25 * 60, gt=0)
    short_break: int = Field(default=5 * 60, gt=0)
    long_break: int = Field(default=15 * 60, gt=0)
    pomodoros: int = Field(
        default=4, gt=0, description="Pomodoros before a long break"
    )

    @field_validator("pomodoro", "short_break", "long_break", mode="before")
    @classmethod
    def parse_duration_string(cls, v):
        """Accept ``"25m"`` style strings as well as plain seconds."""
        if isinstance(v, str):
            return parse_duration(v)
        return v


class UIConfig(BaseModel):
    """Colors and font of the timer screen."""

    model_config = {"extra": "forbid"}

    pomodoro_color: ColorName = "green"
    short_break_color: ColorName = "magenta"
    long_break_color: ColorName = "red"
    background_color: ColorName = "darkgray"
    font: Path | None = Field(default=None, description="FIGlet font file (.flf)")

    @field_validator("font", mode="before")
    @classmethod
    def expand_font_path(cls, v):
        if v is None:
            return v
        return expand_path(v)

    def rich_color(self, name: str) -> str:
        """Return the rich color for one of the ``*_color`` fields."""
        return RICH_COLORS[getattr(self, name)]


class AppConfig(BaseModel):
    """Main Solanum configuration."""

    model_config = {"extra": "forbid"}

    session: SessionConfig = Field(default_factory=SessionConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
