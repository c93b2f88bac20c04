"""
Task subsystem.

Components:
- task_models.py: the Task entity
- task_store.py: in-memory TaskCollection (id assignment + CRUD)
- task_api.py: small helpers used by the CLI (demo seeding, id parsing)
"""

from .task_models import Task
from .task_store import TaskCollection

__all__ = ["Task", "TaskCollection"]
