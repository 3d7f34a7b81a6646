# tests/test_task_prompts.py

from __future__ import annotations

from taskdeck.tasks.task_models import TaskStatus
from taskdeck.tasks.task_prompts import (
    LIMIT_REACHED_MESSAGE,
    prompt_for_new_task,
    prompt_required_text,
    prompt_status,
    validate_required,
    validate_status,
)
from taskdeck.tasks.task_store import TaskStore

from .fakes import RecordingEmitter, ScriptedPrompter


def test_validate_required() -> None:
    assert validate_required("x", "Title") is None
    assert validate_required("   ", "Title") == "Title cannot be empty. Please enter a valid title."
    assert validate_required("", "Description") == (
        "Description cannot be empty. Please enter a valid description."
    )


def test_validate_status_is_case_insensitive() -> None:
    assert validate_status("DONE", TaskStatus) is None
    assert validate_status(" In Progress ", TaskStatus) is None
    assert validate_status("in-progress", TaskStatus) == (
        "Invalid status. Please enter one of: todo, in progress, done"
    )


def test_validate_status_respects_configured_vocabulary() -> None:
    allowed = (TaskStatus.TODO, TaskStatus.DONE)
    assert validate_status("done", allowed) is None
    assert validate_status("in progress", allowed) == "Invalid status. Please enter one of: todo, done"


def test_required_text_reprompts_on_empty() -> None:
    prompter = ScriptedPrompter(["", "   ", "Write report"])
    assert prompt_required_text(prompter, "Enter the task title:", "Title") == "Write report"
    assert len(prompter.questions) == 3
    assert prompter.alerts == ["Title cannot be empty. Please enter a valid title."] * 2


def test_required_text_cancel_stops_immediately() -> None:
    prompter = ScriptedPrompter([None, "never asked"])
    assert prompt_required_text(prompter, "Enter the task title:", "Title") is None
    assert prompter.questions == ["Enter the task title:"]
    assert prompter.alerts == []


def test_status_prompt_rejects_empty_then_unknown() -> None:
    prompter = ScriptedPrompter(["", "later", "Done"])
    assert prompt_status(prompter) is TaskStatus.DONE
    assert prompter.questions[0] == "Enter the task status (todo, in progress, done):"
    assert prompter.alerts == [
        "Status cannot be empty. Please enter a valid status.",
        "Invalid status. Please enter one of: todo, in progress, done",
    ]


def test_status_prompt_cancel() -> None:
    prompter = ScriptedPrompter(["bogus", None])
    assert prompt_status(prompter) is None
    assert len(prompter.alerts) == 1


def test_prompt_for_new_task_adds_task(store: TaskStore, emit: RecordingEmitter) -> None:
    prompter = ScriptedPrompter(["Buy milk", "2% low-fat", "TODO"])

    task = prompt_for_new_task(store, prompter, emit)

    assert task is not None
    assert (task.id, task.title, task.description, task.status) == (4, "Buy milk", "2% low-fat", "todo")
    assert prompter.questions == [
        "Enter the task title:",
        "Enter the task description:",
        "Enter the task status (todo, in progress, done):",
    ]
    assert emit.lines == ['✅ Task "Buy milk" added successfully!']


def test_prompt_for_new_task_without_icons(store: TaskStore, emit: RecordingEmitter) -> None:
    prompter = ScriptedPrompter(["Buy milk", "2% low-fat", "todo"])
    prompt_for_new_task(store, prompter, emit, icons=False)
    assert emit.lines == ['Task "Buy milk" added successfully!']


def test_cancel_at_description_leaves_store_untouched(
    store: TaskStore, emit: RecordingEmitter
) -> None:
    prompter = ScriptedPrompter(["Buy milk", None])

    assert prompt_for_new_task(store, prompter, emit) is None
    assert store.count_tasks() == 3
    assert store.added_count == 0
    assert emit.lines == []


def test_cancel_at_status_leaves_store_untouched(store: TaskStore, emit: RecordingEmitter) -> None:
    prompter = ScriptedPrompter(["Buy milk", "2% low-fat", None])
    assert prompt_for_new_task(store, prompter, emit) is None
    assert store.count_tasks() == 3


def test_limit_reached_refuses_with_notice(emit: RecordingEmitter) -> None:
    store = TaskStore(max_new_tasks=0)
    prompter = ScriptedPrompter()

    assert prompt_for_new_task(store, prompter, emit) is None
    assert prompter.alerts == [LIMIT_REACHED_MESSAGE]
    assert prompter.questions == []
    assert store.count_tasks() == 0
