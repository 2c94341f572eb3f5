"""Completion notifiers.

A notifier is told when a session expires. Delivery is best-effort: the
session engine logs and ignores any exception a notifier raises.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod

from rich.console import Console

from pomotodo.models import NotificationConfig, NotificationError

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Capability interface for session completion alerts."""

    @abstractmethod
    def notify_completion(self, task_label: str | None) -> None:
        """Announce that a session finished, optionally naming its task."""
        raise NotImplementedError


class NullNotifier(Notifier):
    """Notifier that does nothing."""

    def notify_completion(self, task_label: str | None) -> None:
        return None


class DesktopNotifier(Notifier):
    """Rings the terminal bell and raises a system notification.

    The desktop alert uses ``notify-send`` on Linux and ``osascript`` on
    macOS. Either channel can be disabled through ``NotificationConfig``.
    """

    def __init__(
        self,
        config: NotificationConfig | None = None,
        console: Console | None = None,
        timeout: float = 5.0,
    ):
        self.config = config or NotificationConfig()
        self.console = console or Console()
        self.timeout = timeout

    def notify_completion(self, task_label: str | None) -> None:
        """Attempt both channels, then report any failure.

        Raises:
            NotificationError: If at least one enabled channel failed
        """
        errors: list[str] = []

        if self.config.sound:
            try:
                self.console.bell()
            except Exception as e:
                errors.append(f"sound: {e}")

        if self.config.desktop:
            try:
                self._send_desktop_alert(self._body(task_label))
            except NotificationError as e:
                errors.append(f"desktop: {e}")

        if errors:
            raise NotificationError("; ".join(errors))

    def _body(self, task_label: str | None) -> str:
        if task_label:
            return f"{self.config.message}\n{task_label}"
        return self.config.message

    def _send_desktop_alert(self, body: str) -> None:
        command = self._build_command(self.config.title, body)
        if command is None:
            raise NotificationError("no desktop notification tool available")

        try:
            subprocess.run(
                command,
                check=True,
                timeout=self.timeout,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise NotificationError(str(e)) from e

        logger.debug("Desktop notification sent via %s", command[0])

    @staticmethod
    def _build_command(title: str, body: str) -> list[str] | None:
        if sys.platform == "darwin" and shutil.which("osascript"):
            script = f"display notification {_applescript_str(body)} with title {_applescript_str(title)}"
            return ["osascript", "-e", script]
        if shutil.which("notify-send"):
            return ["notify-send", "--app-name=pomotodo", title, body]
        return None


def _applescript_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
