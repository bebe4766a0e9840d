# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes settings once,
- wires the task file and the in-memory store into AppState,
- loads tasks at startup and saves them on quit.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import TaskFileError
from ..core.state import AppState
from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings (tasks are not loaded yet).

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    return AppState(
        settings=settings,
        task_file=TaskFile(settings.tasks_file),
        task_store=TaskStore(),
    )


def load_tasks_into_state(state: AppState) -> int:
    """
    Replace the store with what is on disk; returns the number loaded.

    A malformed or unreadable file is logged and treated as an empty list.
    The file itself is left alone, but the next save overwrites it.
    """
    try:
        tasks = state.task_file.load()
    except TaskFileError:
        logger.exception(
            "Failed to load tasks from %s; starting with an empty list.", state.task_file.path
        )
        tasks = []
    state.task_store.replace_all(tasks)
    return len(tasks)


def save_tasks_from_state(state: AppState) -> None:
    """Write the whole store to disk. Raises TaskFileError on failure."""
    state.task_file.save(state.task_store)
