# src/todo_cli/tasks/task_file.py

"""
JSON file persistence for the task list.

Format: a JSON array of objects
    {"task": "...", "completed": false, "due_date": "YYYY-MM-DD" | null}

The adapter holds no task state: load() reads the whole file, save() replaces
the whole file. Errors are raised as TaskFileError; the caller decides policy.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.errors import TaskFileError
from .task_models import DATE_FORMAT, Task

logger = logging.getLogger(__name__)


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "task": task.description,
        "completed": task.completed,
        "due_date": task.due_date.strftime(DATE_FORMAT) if task.due_date else None,
    }


def task_from_dict(raw: Any) -> Task:
    """Strict decode of one record. Raises ValueError on any shape problem."""
    if not isinstance(raw, dict):
        raise ValueError(f"task record must be an object, got {type(raw).__name__}")

    description = raw["task"] if "task" in raw else raw.get("description")
    if not isinstance(description, str):
        raise ValueError("task record has no string 'task' field")

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        raise ValueError("task record has no boolean 'completed' field")

    due_raw = raw.get("due_date")
    if due_raw is None:
        due_date = None
    elif isinstance(due_raw, str):
        due_date = datetime.strptime(due_raw, DATE_FORMAT).date()
    else:
        raise ValueError("task record 'due_date' must be a string or null")

    return Task(description=description, completed=completed, due_date=due_date)


class TaskFile:
    def __init__(self, path: str | Path = "todos.json") -> None:
        self.path = Path(path)

    def load(self) -> list[Task]:
        """
        Read every task from disk.

        Missing file -> []. Unreadable or malformed file -> TaskFileError.
        """
        if not self.path.exists():
            logger.info("Task file %s not found, starting empty.", self.path)
            return []
        try:
            data = json.loads(self.path.read_text("utf-8"))
        except OSError as e:
            raise TaskFileError(self.path, f"cannot read: {e}") from e
        except (ValueError, RecursionError) as e:
            raise TaskFileError(self.path, f"invalid JSON: {e}") from e

        if not isinstance(data, list):
            raise TaskFileError(self.path, "expected a JSON array of tasks")

        tasks: list[Task] = []
        for pos, raw in enumerate(data, start=1):
            try:
                tasks.append(task_from_dict(raw))
            except ValueError as e:
                raise TaskFileError(self.path, f"record {pos}: {e}") from e

        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Replace the file with the full task list (temp file + os.replace)."""
        payload = [task_to_dict(t) for t in tasks]
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self.path)
        except (OSError, ValueError) as e:
            # UnicodeEncodeError (lone surrogates from input()) is a ValueError.
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskFileError(self.path, f"cannot write: {e}") from e
        logger.info("Saved %d tasks to %s", len(payload), self.path)
