"""Wires the focus service from configuration.

Collaborators (tick source, notifier, repository) are built once here and
injected; nothing in the core reaches for module-level singletons.
"""

from __future__ import annotations

from pomotodo.adapters import JsonFileTaskRepository
from pomotodo.repositories import TaskRepository

from .clock import TickSource
from .config_service import ConfigService
from .focus_service import FocusService
from .notifier import Notifier
from .session_engine import SessionEngine
from .task_store import TaskStore


def create_task_repository(config_service: ConfigService) -> TaskRepository:
    """Build the JSON blob repository described by the storage settings."""
    return JsonFileTaskRepository(
        data_dir=config_service.data_dir, key=config_service.config.storage.key
    )


def create_focus_service(
    repository: TaskRepository, clock: TickSource, notifier: Notifier
) -> FocusService:
    """Load tasks and assemble store, engine and service.

    Raises:
        PersistenceError: If stored tasks cannot be read
    """
    store = TaskStore.open(repository)
    engine = SessionEngine(store, notifier, clock)
    return FocusService(store, engine)
