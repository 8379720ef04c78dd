# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todolist).",
    "TODO_LOG_LEVEL": "Logging level (default: INFO).",
    "TODO_LOG_TO_FILE": "Write <data_dir>/todolist.log (true/false, default: true).",
    # Storage (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todolist).",
    "TODO_STORAGE_BACKEND": "Durable slot backend: json | sqlite (default: json).",
    "TODO_STORAGE_PATH": (
        "Storage file (default: <data_dir>/storage.json or <data_dir>/storage.sqlite3)."
    ),
    "TODO_STORAGE_KEY": "Key holding the serialized task list (default: todos).",
    # Presentation
    "TODO_DEFAULT_FILTER": "Initial filter: all | active | completed (default: all).",
}
