"""Tests for pomotodo.services.task_store."""

from __future__ import annotations

import pytest
from fakes import FailingRepository

from pomotodo.adapters import InMemoryTaskRepository
from pomotodo.models import PersistenceError, Task, ValidationError
from pomotodo.services.task_store import TaskStore


class TestAdd:
    def test_add_creates_fresh_task(self, store):
        task = store.add("Write tests")
        assert task.text == "Write tests"
        assert task.completed is False
        assert task.target_sessions == 1
        assert task.completed_sessions == 0

    def test_add_trims_text(self, store):
        assert store.add("   padded  ").text == "padded"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_add_rejects_blank_text(self, store, repository, text):
        with pytest.raises(ValidationError):
            store.add(text)
        assert store.list() == ()
        assert repository.save_count == 0

    def test_ids_are_unique(self, store):
        ids = {store.add(f"task {i}").id for i in range(50)}
        assert len(ids) == 50

    def test_insertion_order_preserved(self, store):
        for label in ("one", "two", "three"):
            store.add(label)
        assert [t.text for t in store.list()] == ["one", "two", "three"]


class TestToggle:
    def test_toggle_flips_flag(self, store):
        task = store.add("x")
        assert store.toggle_completed(task.id).completed is True
        assert store.toggle_completed(task.id).completed is False

    def test_toggle_unknown_is_noop(self, store, repository):
        store.add("x")
        saves = repository.save_count
        assert store.toggle_completed("missing") is None
        assert repository.save_count == saves

    def test_toggle_keeps_session_count(self, store):
        task = store.add("x")
        store.increment_completed_sessions(task.id)
        assert store.toggle_completed(task.id).completed_sessions == 1


class TestRemove:
    def test_remove(self, store):
        a = store.add("a")
        b = store.add("b")
        assert store.remove(a.id) == a
        assert store.list() == (b,)

    def test_remove_unknown_is_noop(self, store):
        store.add("a")
        assert store.remove("missing") is None
        assert len(store) == 1


class TestIncrement:
    def test_increment(self, store):
        task = store.add("x")
        store.increment_completed_sessions(task.id)
        store.increment_completed_sessions(task.id)
        assert store.get(task.id).completed_sessions == 2

    def test_increment_past_target_allowed(self, store):
        task = store.add("x")
        for _ in range(3):
            store.increment_completed_sessions(task.id)
        updated = store.get(task.id)
        assert updated.completed_sessions == 3
        assert updated.target_sessions == 1

    def test_increment_unknown_is_noop(self, store):
        assert store.increment_completed_sessions("gone") is None


class TestSnapshots:
    def test_list_is_a_snapshot(self, store):
        store.add("a")
        snapshot = store.list()
        store.add("b")
        assert len(snapshot) == 1

    def test_contains(self, store):
        task = store.add("a")
        assert task.id in store
        assert "missing" not in store


class TestPersistence:
    def test_every_mutation_writes_through(self, store, repository):
        task = store.add("a")
        store.toggle_completed(task.id)
        store.increment_completed_sessions(task.id)
        store.remove(task.id)
        assert repository.save_count == 4
        assert repository.load() == []

    def test_reload_reflects_writes(self, repository):
        store = TaskStore(repository)
        task = store.add("persisted")
        store.increment_completed_sessions(task.id)

        reloaded = TaskStore.open(repository)
        assert reloaded.list() == store.list()

    def test_open_empty_repository(self):
        assert TaskStore.open(InMemoryTaskRepository()).list() == ()

    def test_open_existing_records(self):
        repo = InMemoryTaskRepository(
            [{"id": "x", "text": "old", "completed": True, "pomodoros": 2, "completedPomodoros": 5}]
        )
        store = TaskStore.open(repo)
        assert store.get("x") == Task(
            id="x", text="old", completed=True, target_sessions=2, completed_sessions=5
        )

    def test_write_failure_reported_without_rollback(self):
        repo = FailingRepository()
        store = TaskStore(repo)
        task = store.add("kept")

        repo.fail_writes = True
        with pytest.raises(PersistenceError):
            store.toggle_completed(task.id)
        assert store.get(task.id).completed is True

        with pytest.raises(PersistenceError):
            store.add("also kept")
        assert [t.text for t in store.list()] == ["kept", "also kept"]
