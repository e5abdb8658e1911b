# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "Name used in the console greeting (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Persistence
    "TASKPAD_AUTOSAVE": "Save after every command that changes the list (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory for the database and logs (default: .local/taskpad).",
    "TASKPAD_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
}
