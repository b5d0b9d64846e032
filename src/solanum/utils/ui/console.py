"""Console utilities for Solanum."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(stderr: bool = False) -> Console:
    """Get a Rich Console instance for messages printed outside the timer screen."""
    return Console(stderr=stderr, highlight=False)
