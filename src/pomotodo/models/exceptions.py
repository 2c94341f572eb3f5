"""Custom exceptions for Pomotodo."""


class PomotodoError(Exception):
    """Base exception for all Pomotodo errors."""


class ValidationError(PomotodoError):
    """Raised when task input is invalid (e.g. empty text after trimming)."""


class InvalidTarget(PomotodoError):
    """Raised when a session cannot be bound to the requested task.

    The task may not exist, may already be completed, or the engine may not
    be idle.
    """


class PersistenceError(PomotodoError):
    """Raised when the task repository cannot be read or written.

    In-memory state is never rolled back when this is raised.
    """


class NotificationError(PomotodoError):
    """Raised by notifier backends when an alert cannot be delivered."""
