# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing is required; every variable has a default.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in log lines (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_DIR": "Directory for todo.log (default: .local/todo).",
    "TODO_LOG_TO_FILE": "Write the DEBUG log file (true/false, default: true).",
    # Data
    "TODO_TASKS_FILE": "JSON task file path (default: todos.json in the working directory).",
}
