# src/task_manager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used between the core and the presentation layer.

Commands depend on Protocols instead of concrete implementations.
This keeps the task store and the line reader swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """CRUD contract implemented by tasks.task_store.TaskCollection."""

    def add(self, title: str, content: str) -> Task: ...
    def get(self, task_id: int) -> Task | None: ...
    def all(self) -> list[Task]: ...
    def update(
            self,
            task_id: int,
            title: str | None = None,
            content: str | None = None,
    ) -> bool: ...
    def delete(self, task_id: int) -> bool: ...


class LineReader(Protocol):
    """
    Presentation-side port: how commands ask the user for one line.

    read() shows "<message>: ", returns the stripped line and raises EOFError
    when input is exhausted.
    """

    def read(self, message: str) -> str: ...
