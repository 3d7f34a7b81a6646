# src/taskdeck/tasks/task_report.py

from __future__ import annotations

from collections.abc import Sequence

from ..core.ports import Emitter
from .task_models import Task, TaskStatus, status_icon, status_label

SEPARATOR = "=" * 50


def _header(emit: Emitter, title: str) -> None:
    emit("")
    emit(SEPARATOR)
    emit(title)
    emit(SEPARATOR)


def _task_lines(index: int, task: Task) -> list[str]:
    return [
        "",
        f"{index}. Task ID: {task.id}",
        f"   Title: {task.title}",
        f"   Description: {task.description}",
    ]


def render_all(tasks: Sequence[Task], emit: Emitter, *, icons: bool = True) -> None:
    """
    Print every task with its position, fields and a status label.

    An empty list prints "No tasks found." and no footer.
    """
    _header(emit, "📋 ALL TASKS" if icons else "ALL TASKS")

    if not tasks:
        emit("No tasks found.")
        return

    for i, task in enumerate(tasks, start=1):
        for line in _task_lines(i, task):
            emit(line)
        emit(f"   Status: {task.status}")
        label = status_label(task.status)
        emit(f"   {status_icon(task.status)} {label}" if icons else f"   {label}")

    emit("")
    emit(SEPARATOR)


def render_completed(tasks: Sequence[Task], emit: Emitter, *, icons: bool = True) -> None:
    """Print only the tasks whose status is done, followed by their count."""
    completed = [t for t in tasks if t.status == TaskStatus.DONE]

    _header(emit, "✅ COMPLETED TASKS" if icons else "COMPLETED TASKS")

    if not completed:
        emit("No completed tasks found.")
        return

    for i, task in enumerate(completed, start=1):
        for line in _task_lines(i, task):
            emit(line)
        emit(f"   Status: {task.status} ✅" if icons else f"   Status: {task.status}")

    emit("")
    emit(f"Total completed tasks: {len(completed)}")
    emit(SEPARATOR)
