"""
Desktop notifications sent when an interval expires.

Uses notify-send on Linux and osascript on macOS. Delivery is best effort:
every failure is reported as NotifyFailure and the caller carries on.
"""

from __future__ import annotations

import shutil
import subprocess
import sys

from solanum.errors import NotifyFailure
from solanum.models.activity import Activity

APP_NAME = "Solanum"
EXPIRE_MILLISECONDS = 5000
COMMAND_TIMEOUT_SECONDS = 2.0


def notification_text(activity: Activity) -> tuple[str, str, str]:
    """Return (summary, body, urgency) for an expired activity."""
    if activity.is_pomodoro:
        return (
            "Pomodoro completed",
            f"Pomodoro #{activity.ordinal} completed",
            "normal",
        )
    if activity.kind == "short_break":
        return "Short break ended", "Prepare for next pomodoro", "critical"
    return "Long break ended", "Prepare for next pomodoro", "critical"


class Notifier:
    """Sends desktop notifications through the best available backend."""

    def __init__(self, platform: str | None = None):
        self.platform = platform or sys.platform

    def notify(self, activity: Activity) -> None:
        """Notify that ``activity`` has expired.

        Raises:
            NotifyFailure: if no backend is available or the backend failed.
        """
        summary, body, urgency = notification_text(activity)
        self._run(self._command(summary, body, urgency))

    def _command(self, summary: str, body: str, urgency: str) -> list[str]:
        if self.platform == "darwin":
            if shutil.which("osascript") is None:
                raise NotifyFailure("osascript not found")
            script = (
                f'display notification "{_escape(body)}" '
                f'with title "{APP_NAME}" subtitle "{_escape(summary)}"'
            )
            return ["osascript", "-e", script]

        if shutil.which("notify-send") is None:
            raise NotifyFailure("notify-send not found")
        return [
            "notify-send",
            f"--app-name={APP_NAME}",
            f"--urgency={urgency}",
            f"--expire-time={EXPIRE_MILLISECONDS}",
            summary,
            body,
        ]

    @staticmethod
    def _run(cmd: list[str]) -> None:
        try:
            subprocess.run(
                cmd,
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=COMMAND_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            raise NotifyFailure(f"issue on sending desktop notification: {exc}") from exc


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')
