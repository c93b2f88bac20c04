# src/task_manager/core/__init__.py
