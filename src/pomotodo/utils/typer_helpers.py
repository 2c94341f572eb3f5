"""Typer group that answers a mistyped command with its closest names."""

from collections.abc import Iterable
from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from pomotodo.utils.console import get_console
from pomotodo.utils.exit_codes import ERROR_INVALID_ARGS


def close_commands(attempted: str, names: Iterable[str], limit: int = 3) -> list[str]:
    """Command names that look like ``attempted``, best match first."""
    return get_close_matches(attempted, sorted(names), n=limit, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Command group that suggests similar commands instead of a bare usage error."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            matches = close_commands(args[0], self.commands) if args else []
            if not matches:
                raise
            get_console().print(
                f"[red]Error:[/red] no command named '{args[0]}'. "
                f"Did you mean: {', '.join(matches)}?"
            )
            raise typer.Exit(ERROR_INVALID_ARGS) from e
