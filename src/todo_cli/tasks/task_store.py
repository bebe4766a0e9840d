# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from datetime import date

from ..core.errors import TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)

Listed = tuple[int, Task]


class TaskListing:
    """
    Lazy, restartable view over the store: yields (1-based index, Task).

    Nothing is materialized up front; every iteration walks the live list,
    so a listing taken before a mutation reflects the mutation.
    """

    __slots__ = ("_tasks", "_predicate")

    def __init__(self, tasks: list[Task], predicate: Callable[[Task], bool] | None = None) -> None:
        self._tasks = tasks
        self._predicate = predicate

    def __iter__(self) -> Iterator[Listed]:
        for index, task in enumerate(self._tasks, start=1):
            if self._predicate is None or self._predicate(task):
                yield index, task


class TaskStore:
    """
    In-memory ordered task list with 1-based positional access.

    Order is insertion order until sort_by_due_date() rewrites it.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # ---- low-level helpers ----

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise TaskNotFoundError(index, len(self._tasks))
        return index - 1

    # ---- public API ----

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def replace_all(self, tasks: Iterable[Task]) -> None:
        self._tasks[:] = list(tasks)
        logger.debug("Store replaced total=%d", len(self._tasks))

    def get(self, index: int) -> Task:
        return self._tasks[self._position(index)]

    def add(self, description: str, due_date: date | None = None) -> Task:
        task = Task(description=description, due_date=due_date)
        self._tasks.append(task)
        logger.debug("Task added index=%d due_date=%s", len(self._tasks), due_date)
        return task

    def view_all(self) -> TaskListing:
        return TaskListing(self._tasks)

    def mark_completed(self, index: int) -> Task:
        task = self._tasks[self._position(index)]
        task.mark_completed()
        logger.debug("Task completed index=%d", index)
        return task

    def remove(self, index: int) -> Task:
        task = self._tasks.pop(self._position(index))
        logger.debug("Task removed index=%d remaining=%d", index, len(self._tasks))
        return task

    def sort_by_due_date(self) -> None:
        """
        Reorder the store itself (not just the display) by due date.

        Undated tasks come first; list.sort is stable, so equal keys keep
        their relative order and a second call is a no-op.
        """
        self._tasks.sort(key=_due_key)
        logger.debug("Store sorted by due date total=%d", len(self._tasks))

    def search(self, keyword: str) -> TaskListing:
        needle = keyword.lower()
        return TaskListing(self._tasks, lambda task: needle in task.description.lower())


def _due_key(task: Task) -> tuple[bool, date]:
    if task.due_date is None:
        return (False, date.min)
    return (True, task.due_date)
