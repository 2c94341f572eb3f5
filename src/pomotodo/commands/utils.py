"""Shared helpers for commands."""

from __future__ import annotations

from pomotodo.services.clock import PollingTickSource, TickSource
from pomotodo.services.config_service import get_config_service
from pomotodo.services.factory import create_focus_service, create_task_repository
from pomotodo.services.focus_service import FocusService
from pomotodo.services.notifier import Notifier, NullNotifier
from pomotodo.utils.uuid_utils import resolve_task_id


def get_focus_service(
    clock: TickSource | None = None, notifier: Notifier | None = None
) -> FocusService:
    """Build a FocusService over the configured task storage.

    Commands that never run a session get an inert clock and notifier.
    """
    config_service = get_config_service()
    return create_focus_service(
        create_task_repository(config_service),
        clock or PollingTickSource(),
        notifier or NullNotifier(),
    )


def resolve(service: FocusService, task_id: str) -> str:
    """Resolve a full id or unique prefix against the task list."""
    return resolve_task_id(task_id, service.list_tasks())
