"""Session engine - the single focus timer.

State machine::

    idle --bind--> running --pause--> paused --resume--> running
    running --tick (remaining hits 0)--> expired --> idle
    any --stop--> idle

The tick schedule exists only while the engine is running. It is cancelled
on every transition away from running, and ``tick()`` checks the status
before touching anything, so no tick can land after ``pause()`` or
``stop()`` has returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pomotodo.models import (
    SESSION_DURATION_SECONDS,
    TICK_PERIOD_MS,
    InvalidTarget,
    PersistenceError,
    SessionSnapshot,
    SessionStatus,
)

from .clock import TickHandle, TickSource
from .notifier import Notifier
from .task_store import TaskStore

logger = logging.getLogger(__name__)

TransitionListener = Callable[[SessionStatus, SessionStatus], None]


class SessionEngine:
    """Countdown bound to at most one task at a time."""

    def __init__(
        self,
        store: TaskStore,
        notifier: Notifier,
        clock: TickSource,
        *,
        duration: int = SESSION_DURATION_SECONDS,
        period_ms: int = TICK_PERIOD_MS,
    ):
        """Initialize an idle engine.

        Args:
            store: TaskStore credited on expiry
            notifier: Completion alert collaborator
            clock: Tick source driving the countdown
            duration: Session length in ticks (seconds)
            period_ms: Tick period in milliseconds
        """
        if duration <= 0:
            raise ValueError("duration must be positive")

        self.store = store
        self.notifier = notifier
        self.clock = clock
        self.duration = duration
        self.period_ms = period_ms

        self._status: SessionStatus = "idle"
        self._remaining = duration
        self._bound_task_id: str | None = None
        self._handle: TickHandle | None = None
        self._listeners: list[TransitionListener] = []

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def bound_task_id(self) -> str | None:
        return self._bound_task_id

    def snapshot(self) -> SessionSnapshot:
        """Current state for display."""
        return SessionSnapshot(
            status=self._status,
            remaining=self._remaining,
            duration=self.duration,
            bound_task_id=self._bound_task_id,
        )

    def add_listener(self, listener: TransitionListener) -> None:
        """Register ``listener(previous, current)`` for every status change."""
        self._listeners.append(listener)

    def bind(self, task_id: str) -> None:
        """Start a fresh session crediting ``task_id``.

        Raises:
            InvalidTarget: If the engine is not idle, or the task is missing
                or already completed
        """
        if self._status != "idle":
            raise InvalidTarget(f"Cannot start a session while {self._status}")

        task = self.store.get(task_id)
        if task is None:
            raise InvalidTarget(f"Task {task_id} does not exist")
        if task.completed:
            raise InvalidTarget(f"Task {task_id} is already completed")

        self._bound_task_id = task_id
        self._remaining = self.duration
        self._start_ticking()
        self._transition("running")
        logger.info("Session started for task %s (%ds)", task_id, self.duration)

    def pause(self) -> None:
        """Pause a running session. No-op in any other state."""
        if self._status != "running":
            return
        self._stop_ticking()
        self._transition("paused")
        logger.info("Session paused at %ds", self._remaining)

    def resume(self) -> None:
        """Resume a paused session. No-op in any other state."""
        if self._status != "paused":
            return
        self._start_ticking()
        self._transition("running")
        logger.info("Session resumed at %ds", self._remaining)

    def stop(self) -> None:
        """Abandon the session without crediting anything. Always safe."""
        self._stop_ticking()
        was = self._status
        self._reset()
        if was != "idle":
            logger.info("Session stopped")

    def tick(self) -> None:
        """Advance the countdown by one time unit."""
        if self._status != "running":
            return

        self._remaining = max(0, self._remaining - 1)
        if self._remaining > 0:
            return

        self._stop_ticking()
        try:
            self._transition("expired")
            self._complete()
        finally:
            self._reset()

    def _complete(self) -> None:
        """Completion protocol: credit the task, then alert. Runs once per expiry."""
        task_id = self._bound_task_id
        task = self.store.get(task_id) if task_id is not None else None
        label = task.text if task is not None else None

        if task is not None:
            try:
                self.store.increment_completed_sessions(task.id)
            except PersistenceError:
                logger.warning("Session credited to task %s but not persisted", task.id, exc_info=True)

        try:
            self.notifier.notify_completion(label)
        except Exception:
            logger.warning("Completion notification failed", exc_info=True)

        logger.info("Session expired for task %s", task_id)

    def _reset(self) -> None:
        self._remaining = self.duration
        self._bound_task_id = None
        self._transition("idle")

    def _start_ticking(self) -> None:
        self._stop_ticking()
        self._handle = self.clock.start(self.period_ms, self.tick)

    def _stop_ticking(self) -> None:
        if self._handle is not None:
            self.clock.cancel(self._handle)
            self._handle = None

    def _transition(self, status: SessionStatus) -> None:
        previous = self._status
        if previous == status:
            return
        self._status = status
        for listener in list(self._listeners):
            try:
                listener(previous, status)
            except Exception:
                logger.warning("Listener failed on %s -> %s", previous, status, exc_info=True)
