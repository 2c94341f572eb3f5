"""Task management commands."""

import typer

from pomotodo.ui.formatters import format_success, format_tasks_table
from pomotodo.utils.console import get_console
from pomotodo.utils.uuid_utils import shorten_uuid

from .decorators import command_wrapper
from .utils import get_focus_service, resolve

console = get_console()


@command_wrapper
def add_task(
    text: str = typer.Argument(..., help="Task text"),
) -> None:
    """Add a task to the end of the list."""
    service = get_focus_service()
    task = service.add_task(text)
    format_success(f"Added task {shorten_uuid(task.id)}: {task.text}")


@command_wrapper
def list_tasks() -> None:
    """List tasks in the order they were added."""
    service = get_focus_service()
    tasks = service.list_tasks()
    if not tasks:
        console.print("[yellow]No tasks yet. Add one with 'pomotodo add'.[/yellow]")
        return
    console.print(format_tasks_table(tasks))


@command_wrapper
def toggle_task(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
) -> None:
    """Mark a task as done, or as not done if it already is."""
    service = get_focus_service()
    task = service.toggle_task(resolve(service, task_id))
    if task is not None:
        state = "done" if task.completed else "not done"
        format_success(f"Task {shorten_uuid(task.id)} marked {state}")


@command_wrapper
def delete_task(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix"),
) -> None:
    """Delete a task."""
    service = get_focus_service()
    task = service.remove_task(resolve(service, task_id))
    if task is not None:
        format_success(f"Deleted task {shorten_uuid(task.id)}: {task.text}")
