# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskdeck.core.state import AppState
from taskdeck.tasks.task_models import TaskStatus, seed_tasks
from taskdeck.tasks.task_store import TaskStore

from .fakes import RecordingEmitter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskdeck-test",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        max_new_tasks=3,
        valid_statuses=tuple(TaskStatus),
        seed_tasks=True,
        icons=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    """Store seeded with the three startup tasks (ids 1, 2, 3)."""
    return TaskStore(seed_tasks())


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def emit() -> RecordingEmitter:
    return RecordingEmitter()
