# src/taskdeck/tasks/task_prompts.py

"""
Validated prompts for collecting a new task.

Two different exits per field:
- empty / invalid answer -> alert and ask the same field again
- cancelled prompt (None) -> give up on the whole task immediately, no side effects
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.ports import Emitter, Prompter
from .task_models import Task, TaskStatus
from .task_store import TaskStore

logger = logging.getLogger(__name__)

TITLE_QUESTION = "Enter the task title:"
DESCRIPTION_QUESTION = "Enter the task description:"
LIMIT_REACHED_MESSAGE = "There are enough tasks on your board, please check them in the console."


def _vocabulary(valid_statuses: Iterable[TaskStatus]) -> str:
    return ", ".join(s.value for s in valid_statuses)


def validate_required(value: str, field_name: str) -> str | None:
    """Return an error message for an empty/whitespace value, else None."""
    if not value or not value.strip():
        return f"{field_name} cannot be empty. Please enter a valid {field_name.lower()}."
    return None


def validate_status(value: str, valid_statuses: Iterable[TaskStatus]) -> str | None:
    allowed = tuple(valid_statuses)
    status = TaskStatus.parse(value)
    if status is None or status not in allowed:
        return f"Invalid status. Please enter one of: {_vocabulary(allowed)}"
    return None


def prompt_required_text(prompter: Prompter, question: str, field_name: str) -> str | None:
    while True:
        answer = prompter.ask_text(question)
        if answer is None:
            logger.debug("%s prompt cancelled.", field_name)
            return None
        error = validate_required(answer, field_name)
        if error is None:
            return answer
        prompter.alert(error)


def prompt_status(
    prompter: Prompter,
    valid_statuses: Iterable[TaskStatus] = tuple(TaskStatus),
) -> TaskStatus | None:
    allowed = tuple(valid_statuses)
    question = f"Enter the task status ({_vocabulary(allowed)}):"
    while True:
        answer = prompter.ask_text(question)
        if answer is None:
            logger.debug("Status prompt cancelled.")
            return None
        error = validate_required(answer, "Status") or validate_status(answer, allowed)
        if error is None:
            return TaskStatus.parse(answer)
        prompter.alert(error)


def prompt_for_new_task(
    store: TaskStore,
    prompter: Prompter,
    emit: Emitter,
    valid_statuses: Iterable[TaskStatus] = tuple(TaskStatus),
    *,
    icons: bool = True,
) -> Task | None:
    """
    Ask for title, description and status, then add the task to the store.

    Returns the new Task, or None if the limit is reached or the user cancelled.
    """
    if store.limit_reached():
        logger.info("Add refused: limit of %d new tasks reached.", store.max_new_tasks)
        prompter.alert(LIMIT_REACHED_MESSAGE)
        return None

    title = prompt_required_text(prompter, TITLE_QUESTION, "Title")
    if title is None:
        return None

    description = prompt_required_text(prompter, DESCRIPTION_QUESTION, "Description")
    if description is None:
        return None

    status = prompt_status(prompter, valid_statuses)
    if status is None:
        return None

    task = store.add_task(title, description, status)
    prefix = "✅ " if icons else ""
    emit(f'{prefix}Task "{task.title}" added successfully!')
    return task
