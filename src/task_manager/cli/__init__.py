# src/task_manager/cli/__init__.py
