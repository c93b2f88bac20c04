# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Tasks themselves are never written to disk; data_dir only holds the log file.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_MANAGER_APP_NAME": "App display name (default: task-manager).",
    "TASK_MANAGER_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASK_MANAGER_DATA_DIR": "Local directory for the log file (default: .local/task_manager).",
    "TASK_MANAGER_LOG_TO_FILE": "Write <data_dir>/task_manager.log (true/false, default: true).",
    # Startup
    "TASK_MANAGER_SEED_DEMO": "Start with the five demo tasks (true/false, default: true).",
    # Console input
    "TASK_MANAGER_STRICT_IDS": (
        "Re-prompt on non-numeric task ids instead of treating them as 0 (default: false)."
    ),
    "TASK_MANAGER_HISTORY_ENABLED": "Keep input history for the up arrow (default: true).",
    "TASK_MANAGER_HISTORY_LENGTH": "Max remembered input lines (default: 100).",
}
