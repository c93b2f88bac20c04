# src/task_manager/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterator

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskCollection:
    """
    In-memory task store.

    - ids come from a counter starting at 1; it only ever grows, so a deleted
      id is never handed out again
    - storage is an insertion-ordered dict, which is also ascending id order
    - "not found" is a normal outcome: get() returns None, update()/delete()
      return False

    Not thread-safe: callers sharing one collection must lock around it.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id: int = 1

    # ---- create ----

    def add(self, title: str, content: str) -> Task:
        task = Task(self._next_id, title, content)
        self._next_id += 1
        self._tasks[task.id] = task
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return task

    # ---- read ----

    def get(self, task_id: int) -> Task | None:
        return self._tasks.get(task_id)

    def all(self) -> list[Task]:
        """Snapshot of live tasks, oldest first."""
        return list(self._tasks.values())

    # ---- update ----

    def update(
        self,
        task_id: int,
        title: str | None = None,
        content: str | None = None,
    ) -> bool:
        """
        Overwrite the provided fields of a task.

        Returns False (and changes nothing) if the id is unknown.
        Passing neither field is a valid no-op and still returns True.
        """
        task = self.get(task_id)
        if task is None:
            logger.debug("Task update skipped: id=%s not found", task_id)
            return False

        if title is not None:
            task.set_title(title)
        if content is not None:
            task.set_content(content)

        logger.debug(
            "Task updated id=%s title=%s content=%s",
            task_id,
            title is not None,
            content is not None,
        )
        return True

    # ---- delete ----

    def delete(self, task_id: int) -> bool:
        if task_id not in self._tasks:
            logger.debug("Task delete skipped: id=%s not found", task_id)
            return False
        del self._tasks[task_id]
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))
        return True

    # ---- container helpers ----

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        return task_id in self._tasks

    def __iter__(self) -> Iterator[Task]:
        return iter(self.all())
