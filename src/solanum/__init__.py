"""Solanum - a terminal pomodoro timer."""

__version__ = "0.4.0"
