# src/task_manager/tasks/task_models.py

from __future__ import annotations


class Task:
    """
    One tracked task.

    Notes:
    - `id` is fixed at construction (read-only property).
    - `title` / `content` are stored verbatim: no trimming, no validation.
    """

    __slots__ = ("_id", "title", "content")

    def __init__(self, id: int, title: str, content: str) -> None:
        self._id = id
        self.title = title
        self.content = content

    @property
    def id(self) -> int:
        return self._id

    def set_title(self, title: str) -> None:
        self.title = title

    def set_content(self, content: str) -> None:
        self.content = content

    def __str__(self) -> str:
        return f"[{self._id}] {self.title}\n    {self.content}"

    def __repr__(self) -> str:  # debugging only
        return f"Task(id={self._id}, title={self.title!r})"
