# src/taskdeck/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task status vocabulary.

    Notes:
    - values are what gets stored and printed ("in progress" keeps its space)
    - user input is matched case-insensitively after trimming (see parse)
    """

    TODO = "todo"
    IN_PROGRESS = "in progress"
    DONE = "done"

    @classmethod
    def parse(cls, raw: str | None) -> TaskStatus | None:
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    status: TaskStatus


_STATUS_LABELS: dict[str, str] = {
    TaskStatus.DONE: "Completed",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.TODO: "To Do",
}

_STATUS_ICONS: dict[str, str] = {
    TaskStatus.DONE: "✅",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.TODO: "📝",
}

UNKNOWN_STATUS_LABEL = "Unknown Status"
UNKNOWN_STATUS_ICON = "❓"


def status_label(status: str) -> str:
    """Human label for a status; unknown values get "Unknown Status"."""
    return _STATUS_LABELS.get(str(status).lower(), UNKNOWN_STATUS_LABEL)


def status_icon(status: str) -> str:
    return _STATUS_ICONS.get(str(status).lower(), UNKNOWN_STATUS_ICON)


def seed_tasks() -> list[Task]:
    """The tasks every session starts with (fresh objects on each call)."""
    return [
        Task(
            id=1,
            title="Complete JavaScript Assignment",
            description="Finish the array manipulation exercises",
            status=TaskStatus.DONE,
        ),
        Task(
            id=2,
            title="Review Code",
            description="Check and refactor previous projects",
            status=TaskStatus.IN_PROGRESS,
        ),
        Task(
            id=3,
            title="Prepare for Meeting",
            description="Gather documents and notes for team meeting",
            status=TaskStatus.DONE,
        ),
    ]
