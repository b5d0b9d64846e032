"""Expansion of user supplied paths."""

from __future__ import annotations

import os
import re
from pathlib import Path

from solanum.errors import ConfigError

_ENV_VAR = re.compile(r"\$(\w+|\{[^}]*\})")


def expand_path(raw: str | os.PathLike) -> Path:
    """Expand ``~`` and environment variables, then absolutize the path.

    Raises:
        ConfigError: if ``~`` cannot be resolved or a referenced variable is unset.
    """
    path = os.path.expanduser(os.fspath(raw))
    if path.startswith("~"):
        raise ConfigError("unable to expand `~`: `HOME` environment variable not set")

    path = os.path.expandvars(path)
    unresolved = _ENV_VAR.search(path)
    if unresolved:
        name = unresolved.group(1).strip("{}")
        raise ConfigError(f"unable to access environment variable `{name}`: not set")

    return Path(os.path.abspath(path))
