"""Data models for Pomotodo."""

from .config_models import (
    DEFAULT_STORAGE_KEY,
    AppConfig,
    LoggingConfig,
    NotificationConfig,
    StorageConfig,
)
from .exceptions import (
    InvalidTarget,
    NotificationError,
    PersistenceError,
    PomotodoError,
    ValidationError,
)
from .session import (
    SESSION_DURATION_SECONDS,
    TICK_PERIOD_MS,
    SessionSnapshot,
    SessionStatus,
)
from .task import Task, TaskList

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "AppConfig",
    "LoggingConfig",
    "NotificationConfig",
    "StorageConfig",
    "PomotodoError",
    "ValidationError",
    "InvalidTarget",
    "PersistenceError",
    "NotificationError",
    "SESSION_DURATION_SECONDS",
    "TICK_PERIOD_MS",
    "SessionSnapshot",
    "SessionStatus",
    "Task",
    "TaskList",
]
