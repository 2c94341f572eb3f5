"""Focus service - application layer over the task store and session engine.

Commands and the timer UI talk to this class. It owns the rules that span
both components, such as stopping the session when its task is deleted.
"""

from __future__ import annotations

import logging

from pomotodo.models import InvalidTarget, SessionSnapshot, Task

from .session_engine import SessionEngine
from .statistics import Statistics, compute_statistics
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class FocusService:
    """User-level actions on tasks and the focus timer."""

    def __init__(self, store: TaskStore, engine: SessionEngine):
        """Initialize the focus service.

        Args:
            store: TaskStore holding the task list
            engine: SessionEngine crediting sessions to ``store``
        """
        self.store = store
        self.engine = engine

    # Tasks

    def add_task(self, text: str) -> Task:
        return self.store.add(text)

    def toggle_task(self, task_id: str) -> Task | None:
        return self.store.toggle_completed(task_id)

    def remove_task(self, task_id: str) -> Task | None:
        """Delete a task, stopping the session first if it is bound to it.

        The engine is stopped before the store is touched, so even a failed
        write cannot leave the session crediting a deleted task.
        """
        if self.engine.bound_task_id == task_id:
            logger.info("Stopping session bound to deleted task %s", task_id)
            self.engine.stop()
        return self.store.remove(task_id)

    def list_tasks(self) -> tuple[Task, ...]:
        return self.store.list()

    def statistics(self) -> Statistics:
        return compute_statistics(self.store.list(), self.engine.duration)

    # Session

    def start_session(self, task_id: str) -> SessionSnapshot:
        """Start a session on ``task_id``, replacing any session in progress.

        Raises:
            InvalidTarget: If the task is missing or completed
        """
        task = self.store.get(task_id)
        if task is None or task.completed:
            # Validate before stopping so a bad request keeps the current session
            raise InvalidTarget(f"Cannot start a session on task {task_id}")
        self.engine.stop()
        self.engine.bind(task_id)
        return self.engine.snapshot()

    def start_current(self) -> SessionSnapshot | None:
        """Restart the session on the currently bound task, if any."""
        task = self.current_task()
        if task is None:
            return None
        return self.start_session(task.id)

    def toggle_pause(self) -> SessionSnapshot:
        """Pause when running, resume when paused."""
        if self.engine.status == "running":
            self.engine.pause()
        elif self.engine.status == "paused":
            self.engine.resume()
        return self.engine.snapshot()

    def stop_session(self) -> SessionSnapshot:
        self.engine.stop()
        return self.engine.snapshot()

    def current_task(self) -> Task | None:
        """The task the session is crediting, if it still exists."""
        task_id = self.engine.bound_task_id
        return self.store.get(task_id) if task_id is not None else None

    def can_start(self, task_id: str) -> bool:
        """Whether a session may be started on ``task_id`` right now."""
        task = self.store.get(task_id)
        if task is None or task.completed:
            return False
        return self.engine.bound_task_id != task_id
