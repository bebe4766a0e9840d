# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

DATE_FORMAT = "%Y-%m-%d"


@dataclass(slots=True)
class Task:
    """
    One to-do item.

    Tasks have no stable id: the 1-based position in the store is the only
    handle, recomputed every time the list is shown.
    """

    description: str
    completed: bool = False
    due_date: date | None = None

    def mark_completed(self) -> None:
        self.completed = True

    def due_label(self) -> str:
        if self.due_date is None:
            return "No due date"
        return f"Due: {self.due_date.strftime(DATE_FORMAT)}"
