"""Output formatters for Pomotodo."""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table

from pomotodo.models import Task
from pomotodo.services.statistics import Statistics
from pomotodo.utils.console import get_console
from pomotodo.utils.uuid_utils import shorten_uuid


def format_tasks_table(tasks: Sequence[Task]) -> Table:
    """Build the task list table in display order."""
    table = Table(title=f"Tasks ({len(tasks)})", show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("", justify="center")
    table.add_column("Task")
    table.add_column("Sessions", justify="right")

    for task in tasks:
        mark = "[green]✓[/green]" if task.completed else "○"
        text = f"[dim strike]{task.text}[/dim strike]" if task.completed else task.text
        table.add_row(
            shorten_uuid(task.id),
            mark,
            text,
            f"{task.completed_sessions}/{task.target_sessions}",
        )
    return table


def format_statistics_panel(stats: Statistics) -> Panel:
    """Render the running totals."""
    body = (
        f"[bold blue]{stats.total_sessions}[/bold blue] pomodoros completed\n"
        f"[bold green]{stats.total_focus_minutes}[/bold green] minutes focused\n"
        f"[bold magenta]{stats.completed_tasks}[/bold magenta] of {stats.total_tasks} tasks done"
    )
    return Panel(body, title="Statistics", border_style="cyan", padding=(1, 2))


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {message}")
