"""Task repositories backed by a JSON blob store.

The blob store is a directory where each fixed key maps to one JSON file.
The task list is stored as an ordered array of records::

    [{"id": "...", "text": "...", "completed": false,
      "pomodoros": 1, "completedPomodoros": 0}]
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from pomotodo.models import DEFAULT_STORAGE_KEY, PersistenceError, Task, TaskList
from pomotodo.repositories import TaskRepository

logger = logging.getLogger(__name__)


class JsonFileTaskRepository(TaskRepository):
    """Stores the task list as a JSON blob at ``<data_dir>/<key>.json``."""

    def __init__(self, data_dir: Path | None = None, key: str = DEFAULT_STORAGE_KEY):
        """Initialize the repository.

        Args:
            data_dir: Blob store directory (platform data dir if None)
            key: Fixed blob key for the task list
        """
        if data_dir is None:
            from platformdirs import user_data_dir

            data_dir = Path(user_data_dir("pomotodo"))

        self.data_dir = Path(data_dir)
        self.key = key
        self.blob_file = self.data_dir / f"{key}.json"

    def load(self) -> list[Task] | None:
        """Load tasks from the blob. Returns None if the blob does not exist."""
        if not self.blob_file.exists():
            return None

        try:
            raw = self.blob_file.read_bytes()
        except OSError as e:
            raise PersistenceError(f"Cannot read {self.blob_file}: {e}") from e

        try:
            return TaskList.validate_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, PydanticValidationError) as e:
            raise PersistenceError(f"Corrupted task data in {self.blob_file}") from e

    def save(self, tasks: Sequence[Task]) -> None:
        """Write tasks to the blob, replacing it atomically."""
        payload = TaskList.dump_json(list(tasks), by_alias=True, indent=2)
        tmp_file = self.blob_file.with_suffix(".json.tmp")

        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            tmp_file.chmod(0o600)
            os.replace(tmp_file, self.blob_file)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.blob_file}: {e}") from e

        logger.debug("Saved %d tasks to %s", len(tasks), self.blob_file)


class InMemoryTaskRepository(TaskRepository):
    """Keeps the task list as serialized records in memory.

    Records go through the same encoding as the file backend so round-trips
    behave identically.
    """

    def __init__(self, records: list[dict] | None = None):
        self._records: list[dict] | None = records
        self.save_count = 0

    def load(self) -> list[Task] | None:
        if self._records is None:
            return None
        return [Task.from_record(record) for record in self._records]

    def save(self, tasks: Sequence[Task]) -> None:
        self._records = [task.to_record() for task in tasks]
        self.save_count += 1
