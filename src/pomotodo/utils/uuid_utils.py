"""Task id helpers: short display ids and prefix resolution."""

from __future__ import annotations

from collections.abc import Iterable

from pomotodo.models import Task

MIN_PREFIX_LENGTH = 4


class TaskNotFoundError(LookupError):
    """No task, or more than one task, matches an id prefix."""


def shorten_uuid(uuid: str, length: int = 8) -> str:
    """Get shortened version of a task id."""
    return uuid[:length]


def resolve_task_id(short_or_full_id: str, tasks: Iterable[Task]) -> str:
    """Resolve a full id or unique prefix to a full task id.

    Args:
        short_or_full_id: Full id or a prefix of at least MIN_PREFIX_LENGTH chars
        tasks: Candidate tasks

    Returns:
        The matching full id

    Raises:
        TaskNotFoundError: If nothing matches, the prefix is too short, or
            the prefix is ambiguous
    """
    needle = short_or_full_id.strip().lower()
    ids = [task.id for task in tasks]

    if needle in ids:
        return needle

    if len(needle) < MIN_PREFIX_LENGTH:
        raise TaskNotFoundError(
            f"Task id prefix must be at least {MIN_PREFIX_LENGTH} characters: {short_or_full_id}"
        )

    matches = [task_id for task_id in ids if task_id.lower().startswith(needle)]
    if not matches:
        raise TaskNotFoundError(f"No task matching: {short_or_full_id}")
    if len(matches) > 1:
        raise TaskNotFoundError(
            f"Ambiguous task id '{short_or_full_id}' matches {len(matches)} tasks"
        )
    return matches[0]
