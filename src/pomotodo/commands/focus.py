"""Focus command: runs a pomodoro session in the foreground."""

import typer
from rich.panel import Panel

from pomotodo.models import InvalidTarget
from pomotodo.services.clock import PollingTickSource
from pomotodo.services.config_service import get_config_service
from pomotodo.services.notifier import DesktopNotifier
from pomotodo.ui.timer_display import TimerDisplay
from pomotodo.utils.console import get_console
from pomotodo.utils.uuid_utils import shorten_uuid

from .decorators import command_wrapper
from .utils import get_focus_service, resolve

console = get_console()


@command_wrapper
def focus(
    task_id: str = typer.Argument(..., help="Task ID or unique prefix to focus on"),
) -> None:
    """Start a 25-minute focus session on a task.

    Press 'p' to pause or resume and 's' to stop. A session that runs to
    the end counts towards the task.
    """
    config = get_config_service().config
    clock = PollingTickSource()
    service = get_focus_service(
        clock=clock, notifier=DesktopNotifier(config.notifications, console=console)
    )

    resolved = resolve(service, task_id)
    if not service.can_start(resolved):
        raise InvalidTarget(f"Task {shorten_uuid(resolved)} is already completed")

    service.start_session(resolved)
    task = service.current_task()

    display = TimerDisplay(console)
    try:
        outcome = display.run_timer(service, clock)
    finally:
        clock.close()

    if outcome == "completed":
        updated = service.store.get(task.id)
        sessions = f"{updated.completed_sessions}/{updated.target_sessions}" if updated else "-"
        console.print(
            Panel(
                f"[bold green]🎉 Focus session complete![/bold green]\n\n"
                f"Task: {task.text}\nSessions: {sessions}",
                border_style="green",
                padding=(1, 2),
            )
        )
    else:
        console.print(
            Panel(
                f"[yellow]Session stopped[/yellow]\n\nTask: {task.text}\nNo session was counted.",
                border_style="yellow",
                padding=(1, 2),
            )
        )
