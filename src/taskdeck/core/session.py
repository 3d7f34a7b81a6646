# src/taskdeck/core/session.py

"""
One interactive session.

Flow:
- welcome banner
- show all tasks / completed tasks
- ask "add another?" until the user declines, cancels or the limit is reached
- summary, then show both lists again
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..tasks.task_models import TaskStatus
from ..tasks.task_prompts import prompt_for_new_task
from ..tasks.task_report import render_all, render_completed
from ..tasks.task_store import TaskStore
from .ports import Emitter, Prompter
from .state import AppState

logger = logging.getLogger(__name__)


def collect_new_tasks(
    store: TaskStore,
    prompter: Prompter,
    emit: Emitter,
    valid_statuses: Iterable[TaskStatus] = tuple(TaskStatus),
    *,
    icons: bool = True,
) -> int:
    """Run the add-another loop. Returns how many tasks were added by this call."""
    allowed = tuple(valid_statuses)
    added = 0

    while not store.limit_reached():
        answer = prompter.confirm(
            f"Would you like to add a new task? ({store.remaining()} remaining)"
        )
        if answer is None:
            logger.debug("Add-another confirmation cancelled.")
            break
        if not answer:
            logger.debug("User declined to add another task.")
            break

        task = prompt_for_new_task(store, prompter, emit, allowed, icons=icons)
        if task is None:
            logger.info("Add attempt aborted; stopping collection.")
            break
        added += 1

    if store.limit_reached():
        logger.info("Session limit reached (%d new tasks).", store.max_new_tasks)
    return added


def show_tasks(store: TaskStore, emit: Emitter, *, icons: bool = True) -> None:
    render_all(store.all_tasks(), emit, icons=icons)
    render_completed(store.completed_tasks(), emit, icons=icons)


def run_session(state: AppState, prompter: Prompter, emit: Emitter) -> int:
    """Run a full session against state.task_store. Returns the number of tasks added."""
    store = state.task_store
    icons = bool(getattr(state.settings, "icons", True))
    valid_statuses = tuple(getattr(state.settings, "valid_statuses", None) or tuple(TaskStatus))

    emit(f"{'🚀 ' if icons else ''}Welcome to the Task Management System!")
    emit(f"You can add up to {store.max_new_tasks} new tasks.")

    show_tasks(store, emit, icons=icons)

    added = collect_new_tasks(store, prompter, emit, valid_statuses, icons=icons)

    emit("")
    emit(f"{'🎉 ' if icons else ''}Task Management Session Complete!")
    emit(f"Total tasks added: {store.added_count}")

    show_tasks(store, emit, icons=icons)

    logger.info("Session finished added=%d total=%d", added, store.count_tasks())
    return added
