"""Configuration management commands."""

import json

import typer

from pomotodo.services.config_service import get_config_service
from pomotodo.ui.formatters import format_error, format_success
from pomotodo.utils.console import get_console
from pomotodo.utils.exit_codes import ERROR_INVALID_ARGS
from pomotodo.utils.typer_helpers import SuggestingGroup

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


def _parse_value(raw: str):
    """Interpret JSON literals (true, 3, null); anything else stays a string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@app.command("show")
def show_config() -> None:
    """Show the full configuration."""
    console.print_json(data=get_config_service().as_dict())


@app.command("get")
def get_config(key: str = typer.Argument(..., help="Dotted key, e.g. notifications.sound")) -> None:
    """Show one configuration value."""
    service = get_config_service()
    if not service.has_key(key):
        format_error(f"Unknown config key: {key}")
        raise typer.Exit(ERROR_INVALID_ARGS)
    value = service.get(key)
    if hasattr(value, "model_dump"):
        value = value.model_dump()
    console.print(json.dumps(value))


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Dotted key, e.g. notifications.sound"),
    value: str = typer.Argument(..., help="New value (JSON literal or plain string)"),
) -> None:
    """Change one configuration value."""
    try:
        get_config_service().set(key, _parse_value(value))
    except KeyError:
        format_error(f"Unknown config key: {key}")
        raise typer.Exit(ERROR_INVALID_ARGS)
    except ValueError as e:
        format_error(str(e))
        raise typer.Exit(ERROR_INVALID_ARGS)
    format_success(f"Set {key}")


@app.command("reset")
def reset_config(
    key: str | None = typer.Argument(None, help="Dotted key to reset (all if omitted)"),
) -> None:
    """Reset configuration to defaults."""
    try:
        get_config_service().reset(key)
    except KeyError:
        format_error(f"Unknown config key: {key}")
        raise typer.Exit(ERROR_INVALID_ARGS)
    format_success(f"Reset {key or 'all settings'}")
