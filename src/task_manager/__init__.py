# src/task_manager/__init__.py

"""In-memory task tracker: a CRUD task collection plus a menu-driven console front end."""

from .tasks.task_models import Task
from .tasks.task_store import TaskCollection

__all__ = ["Task", "TaskCollection"]
