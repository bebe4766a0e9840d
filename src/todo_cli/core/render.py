# src/todo_cli/core/render.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task

DONE_MARK = "✔"


def format_task_line(index: int, task: Task) -> str:
    mark = DONE_MARK if task.completed else " "
    return f"{index}: [{mark}] {task.description} ({task.due_label()})"


def render_listing(listing: Iterable[tuple[int, Task]]) -> list[str]:
    return [format_task_line(index, task) for index, task in listing]
