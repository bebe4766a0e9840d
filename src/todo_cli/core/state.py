# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..tasks.task_file import TaskFile
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """Everything one process run owns: settings, the task list, its file."""

    # Settings are kept as a plain object so tests can pass a SimpleNamespace.
    settings: Any
    task_file: TaskFile
    task_store: TaskStore = field(default_factory=TaskStore)
