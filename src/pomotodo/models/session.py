"""Session state models for the focus timer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SessionStatus = Literal["idle", "running", "paused", "expired"]

# 25 minutes; session length is fixed
SESSION_DURATION_SECONDS = 25 * 60
TICK_PERIOD_MS = 1000


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of the session engine, used for display."""

    status: SessionStatus
    remaining: int
    duration: int
    bound_task_id: str | None = None

    @property
    def elapsed(self) -> int:
        return self.duration - self.remaining

    @property
    def progress_percent(self) -> float:
        """Share of the session already elapsed, 0-100."""
        return self.elapsed / self.duration * 100

    @property
    def minutes(self) -> int:
        return self.remaining // 60

    @property
    def seconds(self) -> int:
        return self.remaining % 60

    @property
    def clock_text(self) -> str:
        """Remaining time formatted as MM:SS."""
        return f"{self.minutes:02d}:{self.seconds:02d}"

    @property
    def is_active(self) -> bool:
        return self.status in ("running", "paused")
