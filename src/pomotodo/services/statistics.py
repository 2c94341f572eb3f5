"""Running totals over the task list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pomotodo.models import SESSION_DURATION_SECONDS, Task


@dataclass(frozen=True)
class Statistics:
    """Aggregate focus statistics.

    Attributes:
        total_sessions: Completed sessions across all tasks
        total_focus_minutes: total_sessions times the session length, in minutes
        completed_tasks: Number of tasks marked completed
        total_tasks: Number of tasks
    """

    total_sessions: int = 0
    total_focus_minutes: int = 0
    completed_tasks: int = 0
    total_tasks: int = 0


def compute_statistics(
    tasks: Iterable[Task], session_seconds: int = SESSION_DURATION_SECONDS
) -> Statistics:
    """Compute statistics for a task snapshot. Empty input yields all zeros."""
    total_sessions = 0
    completed_tasks = 0
    total_tasks = 0
    for task in tasks:
        total_tasks += 1
        total_sessions += task.completed_sessions
        if task.completed:
            completed_tasks += 1

    return Statistics(
        total_sessions=total_sessions,
        total_focus_minutes=total_sessions * session_seconds // 60,
        completed_tasks=completed_tasks,
        total_tasks=total_tasks,
    )
