"""Main entry point for Pomotodo."""

import typer

from pomotodo import __version__
from pomotodo.commands import config, focus, stats, tasks
from pomotodo.utils.console import get_console
from pomotodo.utils.typer_helpers import SuggestingGroup

app = typer.Typer(
    name="pomotodo",
    cls=SuggestingGroup,
    help="A terminal task list with a pomodoro focus timer",
    no_args_is_help=True,
)

console = get_console()

app.command("add")(tasks.add_task)
app.command("list")(tasks.list_tasks)
app.command("toggle")(tasks.toggle_task)
app.command("delete")(tasks.delete_task)
app.command("focus")(focus.focus)
app.command("stats")(stats.stats)
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Pomotodo[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
