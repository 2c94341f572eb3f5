"""Task store - owns the ordered task collection.

Every mutation is written through to the repository before the method
returns. The store knows nothing about sessions or time; unbinding a
deleted task from a running session is the application layer's job.
"""

from __future__ import annotations

import logging
import uuid

from pomotodo.models import Task, ValidationError
from pomotodo.repositories import TaskRepository

logger = logging.getLogger(__name__)


class TaskStore:
    """Ordered, persisted collection of tasks.

    Unknown ids passed to ``toggle_completed``, ``remove`` or
    ``increment_completed_sessions`` are ignored: the task may already have
    been deleted by another action.
    """

    def __init__(self, repository: TaskRepository, tasks: list[Task] | None = None):
        """Initialize the store.

        Args:
            repository: TaskRepository used for write-through persistence
            tasks: Initial tasks in display order
        """
        self.repository = repository
        self._tasks: list[Task] = list(tasks or [])

    @classmethod
    def open(cls, repository: TaskRepository) -> "TaskStore":
        """Create a store populated from the repository.

        Raises:
            PersistenceError: If stored data cannot be read
        """
        return cls(repository, repository.load() or [])

    def add(self, text: str) -> Task:
        """Create a task at the end of the list.

        Args:
            text: Display label; surrounding whitespace is trimmed

        Returns:
            The created Task

        Raises:
            ValidationError: If the trimmed text is empty
            PersistenceError: If the write fails (the task is still added)
        """
        label = (text or "").strip()
        if not label:
            raise ValidationError("Task text cannot be empty")

        task = Task(id=self._new_id(), text=label)
        self._tasks.append(task)
        logger.info("Added task %s", task.id)
        self._persist()
        return task

    def toggle_completed(self, task_id: str) -> Task | None:
        """Flip the completion flag. Returns the updated task, or None if unknown."""
        index = self._index_of(task_id)
        if index is None:
            return None

        task = self._tasks[index].model_copy(update={"completed": not self._tasks[index].completed})
        self._tasks[index] = task
        logger.info("Task %s completed=%s", task_id, task.completed)
        self._persist()
        return task

    def remove(self, task_id: str) -> Task | None:
        """Delete a task. Returns the removed task, or None if unknown."""
        index = self._index_of(task_id)
        if index is None:
            return None

        task = self._tasks.pop(index)
        logger.info("Removed task %s", task_id)
        self._persist()
        return task

    def increment_completed_sessions(self, task_id: str) -> Task | None:
        """Count one finished session for a task. No-op if the task is gone."""
        index = self._index_of(task_id)
        if index is None:
            return None

        current = self._tasks[index]
        task = current.model_copy(update={"completed_sessions": current.completed_sessions + 1})
        self._tasks[index] = task
        logger.info("Task %s completed_sessions=%d", task_id, task.completed_sessions)
        self._persist()
        return task

    def get(self, task_id: str) -> Task | None:
        """Look up a task by id."""
        index = self._index_of(task_id)
        return None if index is None else self._tasks[index]

    def list(self) -> tuple[Task, ...]:
        """Snapshot of all tasks in display order."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return isinstance(task_id, str) and self._index_of(task_id) is not None

    def _index_of(self, task_id: str) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _new_id(self) -> str:
        while True:
            task_id = str(uuid.uuid4())
            if self._index_of(task_id) is None:
                return task_id

    def _persist(self) -> None:
        self.repository.save(tuple(self._tasks))
