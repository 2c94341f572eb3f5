"""Tick sources for the session engine.

A tick source schedules a repeating callback. ``PollingTickSource`` never
spawns threads: the UI loop calls ``poll()`` and due callbacks run on the
caller's thread, one invocation per elapsed period.
"""

from __future__ import annotations

import itertools
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class TickHandle:
    """Opaque handle returned by ``TickSource.start``."""

    id: int


class TickSource(ABC):
    """Scheduling primitive for repeating callbacks."""

    @abstractmethod
    def start(self, period_ms: int, callback: Callable[[], None]) -> TickHandle:
        """Schedule ``callback`` every ``period_ms`` milliseconds."""
        raise NotImplementedError

    @abstractmethod
    def cancel(self, handle: TickHandle) -> None:
        """Stop a schedule. Unknown or already-cancelled handles are ignored."""
        raise NotImplementedError


@dataclass
class _Schedule:
    period: float
    callback: Callable[[], None]
    next_due: float


class PollingTickSource(TickSource):
    """Cooperative scheduler driven by explicit ``poll()`` calls."""

    def __init__(self, time_func: Callable[[], float] = time.monotonic):
        self._time = time_func
        self._schedules: dict[TickHandle, _Schedule] = {}
        self._ids = itertools.count(1)

    def start(self, period_ms: int, callback: Callable[[], None]) -> TickHandle:
        if period_ms <= 0:
            raise ValueError("period_ms must be positive")
        handle = TickHandle(next(self._ids))
        period = period_ms / 1000
        self._schedules[handle] = _Schedule(period, callback, self._time() + period)
        return handle

    def cancel(self, handle: TickHandle) -> None:
        self._schedules.pop(handle, None)

    @property
    def active(self) -> bool:
        """Whether any schedule is pending."""
        return bool(self._schedules)

    def poll(self) -> int:
        """Run every callback that is due. Returns the number of invocations.

        A late poll catches up with one invocation per missed period. A
        schedule cancelled by a callback (its own or another) is not invoked
        again, even within the same poll.
        """
        fired = 0
        now = self._time()
        for handle in list(self._schedules):
            while True:
                schedule = self._schedules.get(handle)
                if schedule is None or schedule.next_due > now:
                    break
                schedule.next_due += schedule.period
                schedule.callback()
                fired += 1
        return fired

    def close(self) -> None:
        """Cancel everything."""
        self._schedules.clear()
