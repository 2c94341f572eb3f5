"""Service layer for Pomotodo."""

from .clock import PollingTickSource, TickHandle, TickSource
from .focus_service import FocusService
from .notifier import DesktopNotifier, Notifier, NullNotifier
from .session_engine import SessionEngine
from .statistics import Statistics, compute_statistics
from .task_store import TaskStore

__all__ = [
    "PollingTickSource",
    "TickHandle",
    "TickSource",
    "FocusService",
    "DesktopNotifier",
    "Notifier",
    "NullNotifier",
    "SessionEngine",
    "Statistics",
    "compute_statistics",
    "TaskStore",
]
