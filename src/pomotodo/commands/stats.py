"""Statistics command."""

import json

import typer

from pomotodo.ui.formatters import format_statistics_panel
from pomotodo.utils.console import get_console

from .decorators import command_wrapper
from .utils import get_focus_service

console = get_console()


@command_wrapper
def stats(
    json_opt: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show completed pomodoros, focused minutes and finished tasks."""
    result = get_focus_service().statistics()
    if json_opt:
        print(
            json.dumps(
                {
                    "total_sessions": result.total_sessions,
                    "total_focus_minutes": result.total_focus_minutes,
                    "completed_tasks": result.completed_tasks,
                    "total_tasks": result.total_tasks,
                }
            )
        )
        return
    console.print(format_statistics_panel(result))
