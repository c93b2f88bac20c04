# tests/test_task_api.py

from __future__ import annotations

import pytest

from task_manager.tasks.task_api import (
    DEMO_TASKS,
    parse_task_id,
    parse_task_id_strict,
    seed_demo_tasks,
)
from task_manager.tasks.task_store import TaskCollection


def test_seed_demo_tasks_adds_all_in_order() -> None:
    tasks = TaskCollection()
    created = seed_demo_tasks(tasks)

    assert [t.id for t in created] == [1, 2, 3, 4, 5]
    assert [t.title for t in tasks.all()] == [title for title, _ in DEMO_TASKS]
    assert tasks.get(1) is not None
    assert tasks.get(1).content == "Milk, eggs, bread, and cheese."


def test_seed_continues_after_existing_ids() -> None:
    tasks = TaskCollection()
    tasks.add("mine", "")
    tasks.delete(1)

    created = seed_demo_tasks(tasks, [("a", "1"), ("b", "2")])
    assert [t.id for t in created] == [2, 3]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("7", 7),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("-3", -3),
        ("+4", 4),
        ("  9", 9),
        ("3.9", 3),
        ("\u0661\u0662", 0),
        ("7\u0663", 7),
    ],
)
def test_parse_task_id_is_permissive(raw: str, expected: int) -> None:
    assert parse_task_id(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("7", 7),
        (" 8 ", 8),
        ("-2", -2),
        ("12abc", None),
        ("abc", None),
        ("", None),
        ("3.9", None),
        ("\u0661\u0662", None),
    ],
)
def test_parse_task_id_strict(raw: str, expected: int | None) -> None:
    assert parse_task_id_strict(raw) == expected
