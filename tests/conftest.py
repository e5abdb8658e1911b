# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
from fakes import FakeTaskRepo

from taskpad.core.state import AppState
from taskpad.tasks.task_models import TaskList


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="WARNING",
        autosave=True,
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
    )


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with an in-memory repo instead of SQLite."""
    return AppState(settings=settings, task_store=FakeTaskRepo())
