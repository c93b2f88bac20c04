# src/task_manager/connectors/__init__.py
