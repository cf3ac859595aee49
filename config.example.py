# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    "TODO_USERNAME": "Name used in the main menu greeting (default: Usuario).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_TASKS_PATH": "Tasks JSON file (default: <data_dir>/tasks.json).",
    "TODO_LOG_DIR": "Directory for todo.log (default: <data_dir>).",
}
