# src/task_manager/tasks/task_api.py

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .task_models import Task
from .task_store import TaskCollection

logger = logging.getLogger(__name__)

DEMO_TASKS: tuple[tuple[str, str], ...] = (
    ("Buy groceries", "Milk, eggs, bread, and cheese."),
    ("Finish report", "Complete the Q3 financial report by Friday."),
    ("Call Mom", "Check in and see how she’s doing."),
    ("Read book", "Start reading “Sapiens” – chapters 1‑3."),
    ("Plan weekend trip", "Research cabins near the lake for Saturday night."),
)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?[0-9]+)")
_STRICT_INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def seed_demo_tasks(
    collection: TaskCollection,
    demo: Iterable[tuple[str, str]] = DEMO_TASKS,
) -> list[Task]:
    """
    Convenience helper: fill a collection with sample tasks via add().
    Ids continue from whatever the collection already issued.
    """
    created = [collection.add(title, content) for title, content in demo]
    logger.info("Seeded %d demo tasks.", len(created))
    return created


def parse_task_id(raw: str) -> int:
    """
    Permissive id parsing: leading integer wins, anything else is 0.

    "12abc" -> 12, "abc" -> 0, "" -> 0, "-3" -> -3.
    """
    m = _LEADING_INT_RE.match(raw)
    if not m:
        return 0
    return int(m.group(1))


def parse_task_id_strict(raw: str) -> int | None:
    if not _STRICT_INT_RE.match(raw):
        return None
    return int(raw)
