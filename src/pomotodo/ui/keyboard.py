"""Non-blocking keyboard input for timer controls."""

from __future__ import annotations

import select
import sys


class KeyboardHandler:
    """Reads single keypresses from a terminal without blocking.

    Falls back to never reporting a key when stdin is not a POSIX tty.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None
        self._setup()

    def _setup(self) -> None:
        try:
            import termios
            import tty

            fd = self.stream.fileno()
            self.old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (ImportError, OSError, ValueError, AttributeError):
            # Not a tty (pipe, test runner) or no termios on this platform
            self.old_settings = None

    @property
    def interactive(self) -> bool:
        return self.old_settings is not None

    def get_key(self) -> str | None:
        """Return the pressed key in lower case, or None if nothing is waiting."""
        if not self.interactive:
            return None
        try:
            ready, _, _ = select.select([self.stream], [], [], 0)
        except (OSError, ValueError):
            return None
        if not ready:
            return None
        key = self.stream.read(1)
        return key.lower() if key else None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings is None:
            return
        import termios

        try:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self.old_settings)
        except (OSError, ValueError):
            pass
        self.old_settings = None
