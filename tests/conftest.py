"""Shared test fixtures and configuration.

Isolates tests from real platform directories: config, task data and logs
all land in *tmp_path*.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from fakes import FakeTickSource, RecordingNotifier

from pomotodo.adapters import InMemoryTaskRepository
from pomotodo.services.focus_service import FocusService
from pomotodo.services.session_engine import SessionEngine
from pomotodo.services.task_store import TaskStore


# ---------------------------------------------------------------------------
# Platform directory isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config, data and log directories at tmp_path."""
    import pomotodo.utils.logger as logger_mod
    from pomotodo.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    log_dir = tmp_path / "logs"

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("pomotodo").handlers.clear()

    with (
        patch("pomotodo.services.config_service.user_config_dir", return_value=str(config_dir)),
        patch("pomotodo.services.config_service.user_data_dir", return_value=str(data_dir)),
        patch("pomotodo.utils.logger.user_log_dir", return_value=str(log_dir)),
    ):
        yield {"config": config_dir, "data": data_dir, "logs": log_dir}

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("pomotodo").handlers.clear()


# ---------------------------------------------------------------------------
# Core components
# ---------------------------------------------------------------------------


@pytest.fixture()
def repository():
    return InMemoryTaskRepository()


@pytest.fixture()
def store(repository):
    return TaskStore(repository)


@pytest.fixture()
def clock():
    return FakeTickSource()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def engine(store, notifier, clock):
    """Engine with a 3-second session so expiry is quick to reach."""
    return SessionEngine(store, notifier, clock, duration=3)


@pytest.fixture()
def service(store, engine):
    return FocusService(store, engine)
