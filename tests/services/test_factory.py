"""Tests for assembling the focus service."""

from __future__ import annotations

import pytest
from fakes import FakeTickSource, RecordingNotifier

from pomotodo.adapters import InMemoryTaskRepository, JsonFileTaskRepository
from pomotodo.models import PersistenceError
from pomotodo.services.factory import create_focus_service


def test_loads_stored_tasks_and_wires_collaborators():
    repo = InMemoryTaskRepository([{"id": "t1", "text": "Stored", "pomodoros": 2}])
    clock = FakeTickSource()
    notifier = RecordingNotifier()

    service = create_focus_service(repo, clock, notifier)

    assert [t.text for t in service.list_tasks()] == ["Stored"]
    assert service.engine.notifier is notifier
    assert service.engine.clock is clock


def test_unreadable_storage_propagates(tmp_path):
    repo = JsonFileTaskRepository(data_dir=tmp_path)
    repo.blob_file.write_bytes(b"\xff\xfe")
    with pytest.raises(PersistenceError):
        create_focus_service(repo, FakeTickSource(), RecordingNotifier())
