"""Repository abstraction layer for Pomotodo.

Defines the persistence port for the task list. Business logic only ever
sees this interface, never a concrete backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pomotodo.models import Task


class TaskRepository(ABC):
    """Abstract base class for task list persistence.

    The whole ordered task collection is loaded and saved as one unit.
    """

    @abstractmethod
    def load(self) -> list[Task] | None:
        """Load the stored task list.

        Returns:
            Tasks in display order, or None if nothing was ever saved

        Raises:
            PersistenceError: If the backing store cannot be read or decoded
        """
        raise NotImplementedError("TaskRepository.load() must be implemented by adapter")

    @abstractmethod
    def save(self, tasks: Sequence[Task]) -> None:
        """Persist the full task list, replacing what was stored.

        Args:
            tasks: Tasks in display order

        Raises:
            PersistenceError: If the backing store cannot be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")
