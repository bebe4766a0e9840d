# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_cli.core.state import AppState
from todo_cli.tasks.task_file import TaskFile
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level=logging.WARNING,
        log_dir=tmp_path / "logs",
        log_to_file=False,
        tasks_file=tmp_path / "todos.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(
        settings=settings,
        task_file=TaskFile(settings.tasks_file),
        task_store=TaskStore(),
    )
