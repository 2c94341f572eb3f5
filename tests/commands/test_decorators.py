"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer

from pomotodo.commands.decorators import command_wrapper
from pomotodo.models import InvalidTarget, PersistenceError, ValidationError
from pomotodo.utils.uuid_utils import TaskNotFoundError


def _raising(exc: Exception):
    @command_wrapper
    def cmd():
        raise exc

    return cmd


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def cmd():
            return 42

        assert cmd() == 42

    def test_preserves_name(self):
        @command_wrapper
        def add_task():
            """Add a task."""

        assert add_task.__name__ == "add_task"
        assert add_task.__doc__ == "Add a task."

    @pytest.mark.parametrize(
        "exc, code",
        [
            (ValidationError("Task text cannot be empty"), 2),
            (InvalidTarget("Task abc is already completed"), 2),
            (TaskNotFoundError("No task matching: abcd"), 5),
            (PersistenceError("Cannot write blob"), 7),
            (RuntimeError("boom"), 1),
        ],
    )
    def test_maps_errors_to_exit_codes(self, exc, code):
        with patch("pomotodo.commands.decorators.format_error") as mock_error:
            with pytest.raises(typer.Exit) as exc_info:
                _raising(exc)()
        assert exc_info.value.exit_code == code
        assert str(exc) in mock_error.call_args[0][0]

    def test_typer_exit_passes_through(self):
        with patch("pomotodo.commands.decorators.format_error") as mock_error:
            with pytest.raises(typer.Exit) as exc_info:
                _raising(typer.Exit(3))()
        assert exc_info.value.exit_code == 3
        mock_error.assert_not_called()

    def test_failures_are_logged(self, isolated_dirs):
        with patch("pomotodo.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                _raising(PersistenceError("disk full"))()
        log_text = (isolated_dirs["logs"] / "pomotodo.log").read_text()
        assert "command failed: cmd" in log_text
        assert "ERROR_STORAGE" in log_text
        assert "disk full" in log_text
