# src/task_manager/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in command handlers.
    settings: object

    tasks: TaskRepo

    # Cleared by the exit command; the console loop stops on the next turn.
    running: bool = True
