"""Tests for the focus command.

The fullscreen display is replaced with a stand-in that drives the engine
directly, so no terminal or wall-clock time is needed.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fakes import RecordingNotifier
from typer.testing import CliRunner

from pomotodo.commands.utils import get_focus_service
from pomotodo.main import app

runner = CliRunner()


class CompletingDisplay:
    def __init__(self, console=None):
        self.console = console

    def run_timer(self, service, clock):
        assert service.engine.status == "running"
        for _ in range(service.engine.duration):
            service.engine.tick()
        return "completed"


class StoppingDisplay(CompletingDisplay):
    def run_timer(self, service, clock):
        service.engine.tick()
        service.stop_session()
        return "stopped"


@pytest.fixture()
def notifier():
    recording = RecordingNotifier()
    with patch("pomotodo.commands.focus.DesktopNotifier", return_value=recording):
        yield recording


@pytest.fixture()
def task():
    return get_focus_service().add_task("Deep work")


def test_completed_session_is_counted(task, notifier):
    with patch("pomotodo.commands.focus.TimerDisplay", CompletingDisplay):
        result = runner.invoke(app, ["focus", task.id[:8]])

    assert result.exit_code == 0
    assert "Focus session complete" in result.stdout
    assert "1/1" in result.stdout
    assert notifier.labels == ["Deep work"]
    assert get_focus_service().list_tasks()[0].completed_sessions == 1


def test_sessions_beyond_target_still_counted(task, notifier):
    with patch("pomotodo.commands.focus.TimerDisplay", CompletingDisplay):
        runner.invoke(app, ["focus", task.id])
        result = runner.invoke(app, ["focus", task.id])

    assert "2/1" in result.stdout
    assert get_focus_service().list_tasks()[0].completed_sessions == 2


def test_stopped_session_is_not_counted(task, notifier):
    with patch("pomotodo.commands.focus.TimerDisplay", StoppingDisplay):
        result = runner.invoke(app, ["focus", task.id])

    assert result.exit_code == 0
    assert "Session stopped" in result.stdout
    assert notifier.labels == []
    assert get_focus_service().list_tasks()[0].completed_sessions == 0


def test_completed_task_rejected(task, notifier):
    get_focus_service().toggle_task(task.id)
    with patch("pomotodo.commands.focus.TimerDisplay", CompletingDisplay):
        result = runner.invoke(app, ["focus", task.id])

    assert result.exit_code == 2
    assert "already completed" in result.stdout


def test_unknown_task(notifier):
    result = runner.invoke(app, ["focus", "deadbeef"])
    assert result.exit_code == 5
