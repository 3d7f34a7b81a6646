# src/taskdeck/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings in the app, a SimpleNamespace in tests).
    settings: object

    task_store: TaskStore
