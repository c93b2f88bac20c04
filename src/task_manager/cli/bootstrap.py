# src/task_manager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings (injected, or loaded once),
- builds a fresh, caller-owned TaskCollection (there is no global one),
- optionally fills it with the demo tasks.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_api import seed_demo_tasks
from ..tasks.task_store import TaskCollection

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    tasks = TaskCollection()
    if getattr(settings, "seed_demo", False):
        seed_demo_tasks(tasks)

    logger.debug("State ready: %d tasks.", len(tasks))
    return AppState(settings=settings, tasks=tasks)
