# src/taskdeck/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

MAX_NEW_TASKS = 3


class TaskLimitReached(RuntimeError):
    """Raised when a session tries to add more tasks than its cap allows."""


class TaskStore:
    """
    In-memory task store for one session.

    - tasks keep insertion order
    - ids are max(existing) + 1, so they stay unique without a separate counter
    - added_count only counts tasks added through add_task (seed tasks excluded)

    Input validation happens in the prompt layer (task_prompts); add_task only
    normalizes whitespace/case. The session cap is enforced here as well.
    """

    def __init__(
        self,
        tasks: Iterable[Task] | None = None,
        *,
        max_new_tasks: int = MAX_NEW_TASKS,
    ) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._max_new_tasks = max(0, int(max_new_tasks))
        self._added_count = 0
        logger.info(
            "TaskStore ready total=%d max_new_tasks=%d", len(self._tasks), self._max_new_tasks
        )

    # ---- session counter ----

    @property
    def max_new_tasks(self) -> int:
        return self._max_new_tasks

    @property
    def added_count(self) -> int:
        return self._added_count

    def remaining(self) -> int:
        return max(0, self._max_new_tasks - self._added_count)

    def limit_reached(self) -> bool:
        return self._added_count >= self._max_new_tasks

    # ---- operations ----

    def next_id(self) -> int:
        if not self._tasks:
            return 1
        return max(t.id for t in self._tasks) + 1

    def add_task(self, title: str, description: str, status: str) -> Task:
        """
        Append a new task built from already validated input.

        Raises:
            TaskLimitReached: the session already added max_new_tasks tasks.
            ValueError: status is not one of TaskStatus values.
        """
        if self.limit_reached():
            raise TaskLimitReached(
                f"session limit of {self._max_new_tasks} new tasks reached"
            )

        task = Task(
            id=self.next_id(),
            title=title.strip(),
            description=description.strip(),
            status=TaskStatus(str(status).lower().strip()),
        )
        self._tasks.append(task)
        self._added_count += 1
        logger.info(
            "Task added id=%s status=%s added=%d/%d",
            task.id,
            task.status,
            self._added_count,
            self._max_new_tasks,
        )
        return task

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.status == TaskStatus.DONE]

    def count_tasks(self) -> int:
        return len(self._tasks)
