# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.core.state import AppState
from task_manager.tasks.task_store import TaskCollection


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="task-manager-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        log_to_file=False,
        seed_demo=False,
        strict_ids=False,
        history_enabled=False,
        history_length=10,
    )


@pytest.fixture()
def collection() -> TaskCollection:
    """Collection pre-seeded with two known tasks (ids 1 and 2)."""
    tasks = TaskCollection()
    tasks.add("Buy groceries", "Milk, eggs, bread, and cheese.")
    tasks.add("Finish report", "Complete the Q3 financial report by Friday.")
    return tasks


@pytest.fixture()
def state(settings: SimpleNamespace, collection: TaskCollection) -> AppState:
    return AppState(settings=settings, tasks=collection)
