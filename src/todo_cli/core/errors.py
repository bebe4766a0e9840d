# src/todo_cli/core/errors.py

"""
Error taxonomy.

User-input errors (ParseError, TaskNotFoundError, DateFormatError) are handled
inside the current menu iteration. TaskFileError is raised by the persistence
layer; the caller decides whether it is fatal.
"""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for all todo_cli errors."""


class ParseError(TodoError, ValueError):
    """A menu choice or task number is not a non-negative integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"not a number: {raw!r}")
        self.raw = raw


class TaskNotFoundError(TodoError, LookupError):
    """1-based index outside [1, len(store)]."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"task {index} not found (have {size})")
        self.index = index
        self.size = size


class DateFormatError(TodoError, ValueError):
    """Due date is not YYYY-MM-DD."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"invalid date {raw!r}, expected YYYY-MM-DD")
        self.raw = raw


class TaskFileError(TodoError):
    """Task file could not be read, parsed, or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason
