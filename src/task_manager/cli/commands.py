# src/task_manager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import LineReader
from ..core.state import AppState
from ..tasks.task_api import parse_task_id, parse_task_id_strict

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, LineReader, CommandEmitter], str]

MENU_TITLE = "=== Task Manager (CLI) ==="

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Numbered menu registry used by the console connector (1..6, plus word aliases)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._labels: dict[str, str] = {}

    def register(
        self,
        key: str,
        handler: CommandHandler,
        label: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = key.lower()
        self._handlers[key] = handler
        self._labels[key] = label
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        choice: str,
        reader: LineReader,
        emit: CommandEmitter | None = None,
    ) -> str:
        """
        Run the handler selected by `choice` and return its reply.
        Unknown choices get a hint instead of an error.
        """
        handler = self._handlers.get(choice.strip().lower())
        if not handler:
            return f"Please choose a number between {self._range_hint()}."
        return handler(state, reader, emit or _discard)

    def build_menu(self) -> str:
        lines = ["", MENU_TITLE]
        for key, label in self._labels.items():
            lines.append(f"{key}) {label}")
        return "\n".join(lines)

    def _range_hint(self) -> str:
        keys = list(self._labels)
        if not keys:
            return "the listed options"
        return f"{keys[0]}-{keys[-1]}"


registry = CommandRegistry()


def _discard(_: str) -> None:
    return None


def _read_task_id(
    state: AppState,
    reader: LineReader,
    emit: CommandEmitter,
    message: str,
) -> int:
    """
    Ask for a task id.

    Default is permissive (garbage -> 0, which never matches a task).
    With settings.strict_ids, keep asking until the line is a whole integer.
    """
    if not getattr(state.settings, "strict_ids", False):
        return parse_task_id(reader.read(message))

    while True:
        task_id = parse_task_id_strict(reader.read(message))
        if task_id is not None:
            return task_id
        emit("Invalid id.")


def _blank_to_none(value: str) -> str | None:
    return value if value != "" else None


def cmd_list(state: AppState, reader: LineReader, emit: CommandEmitter) -> str:
    tasks = state.tasks.all()
    if not tasks:
        return "No tasks found."
    return "\n".join(str(t) for t in tasks)


def cmd_create(state: AppState, reader: LineReader, emit: CommandEmitter) -> str:
    title = reader.read("Enter title")
    content = reader.read("Enter content")
    task = state.tasks.add(title, content)
    logger.info("Created task id=%s", task.id)
    return f"Created task #{task.id}."


def cmd_view(state: AppState, reader: LineReader, emit: CommandEmitter) -> str:
    task_id = _read_task_id(state, reader, emit, "Enter task ID")
    task = state.tasks.get(task_id)
    if task is None:
        return f"Task #{task_id} not found."
    return str(task)


def cmd_update(state: AppState, reader: LineReader, emit: CommandEmitter) -> str:
    """
    Check the id first so the user is not asked for fields of a missing task.
    Blank answers keep the current value.
    """
    task_id = _read_task_id(state, reader, emit, "Enter task ID to update")
    if state.tasks.get(task_id) is None:
        return f"Task #{task_id} not found."

    new_title = _blank_to_none(reader.read("New title (blank to keep)"))
    new_content = _blank_to_none(reader.read("New content (blank to keep)"))

    if not state.tasks.update(task_id, new_title, new_content):
        logger.warning("Task id=%s vanished between lookup and update.", task_id)
        return "Failed to update task."
    logger.info("Updated task id=%s", task_id)
    return f"Task #{task_id} updated."


def cmd_delete(state: AppState, reader: LineReader, emit: CommandEmitter) -> str:
    task_id = _read_task_id(state, reader, emit, "Enter task ID to delete")
    if not state.tasks.delete(task_id):
        return f"Task #{task_id} not found."
    logger.info("Deleted task id=%s", task_id)
    return f"Task #{task_id} deleted."


def cmd_exit(state: AppState, reader: LineReader, emit: CommandEmitter) -> str:
    state.running = False
    return "Goodbye!"


registry.register("1", cmd_list, label="List all tasks", aliases=["list", "ls"])
registry.register("2", cmd_create, label="Create a new task", aliases=["add", "create", "new"])
registry.register("3", cmd_view, label="View a task", aliases=["view", "show"])
registry.register("4", cmd_update, label="Update a task", aliases=["update", "edit"])
registry.register("5", cmd_delete, label="Delete a task", aliases=["delete", "rm"])
registry.register("6", cmd_exit, label="Exit", aliases=["exit", "quit", "q"])
