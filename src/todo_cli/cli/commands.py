# src/todo_cli/cli/commands.py

"""
Numbered menu commands.

Each command owns one loop state: the console connector reads a choice,
the registry routes it to a handler, the handler reads whatever extra
input it needs through `ask`, prints through `emit`, and returns. User
input errors are reported here and never leave the handler.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..core.errors import DateFormatError, ParseError, TaskNotFoundError
from ..core.parsing import parse_due_date, parse_number
from ..core.render import render_listing
from ..core.state import AppState
from .bootstrap import save_tasks_from_state

Ask = Callable[[str], str]
Emit = Callable[[str], None]
CommandHandler = Callable[[AppState, Ask, Emit], None]

logger = logging.getLogger(__name__)

MENU_TITLE = "Todo List CLI"


class LoopState(str, Enum):
    AWAITING_CHOICE = "awaiting_choice"
    ADDING = "adding"
    VIEWING = "viewing"
    COMPLETING = "completing"
    REMOVING = "removing"
    VIEWING_SORTED = "viewing_sorted"
    SEARCHING = "searching"
    QUITTING = "quitting"
    DONE = "done"


@dataclass(slots=True, frozen=True)
class Command:
    number: int
    label: str
    state: LoopState
    handler: CommandHandler


class CommandRegistry:
    """Menu-number registry used by the console connector."""

    def __init__(self) -> None:
        self._commands: dict[int, Command] = {}

    def register(self, number: int, handler: CommandHandler, label: str, state: LoopState) -> None:
        if number in self._commands:
            raise ValueError(f"menu number {number} already registered")
        self._commands[number] = Command(number=number, label=label, state=state, handler=handler)

    def get(self, number: int) -> Command | None:
        return self._commands.get(number)

    def build_menu(self) -> str:
        lines = [MENU_TITLE]
        for number in sorted(self._commands):
            lines.append(f"{number}: {self._commands[number].label}")
        return "\n".join(lines)

    def handle(self, state: AppState, line: str, ask: Ask, emit: Emit) -> LoopState:
        """
        Run one menu iteration for the raw choice `line`.

        Returns the state the loop is in afterwards: DONE after quitting,
        AWAITING_CHOICE otherwise (including every invalid choice).
        """
        try:
            number = parse_number(line)
        except ParseError:
            emit("Invalid choice, please enter a number.")
            return LoopState.AWAITING_CHOICE

        command = self._commands.get(number)
        if command is None:
            emit("Invalid choice, please try again.")
            return LoopState.AWAITING_CHOICE

        logger.debug("Menu %d -> %s", number, command.state.value)
        command.handler(state, ask, emit)

        if command.state is LoopState.QUITTING:
            return LoopState.DONE
        return LoopState.AWAITING_CHOICE


registry = CommandRegistry()


def _emit_listing(emit: Emit, header: str, lines: list[str]) -> None:
    emit(header)
    for line in lines:
        emit(line)


def _ask_index(ask: Ask, emit: Emit, prompt: str) -> int | None:
    try:
        return parse_number(ask(prompt))
    except ParseError:
        emit("Invalid number.")
        return None


def cmd_add(state: AppState, ask: Ask, emit: Emit) -> None:
    description = ask("Enter the task: ").strip()
    raw_due = ask("Enter the due date (YYYY-MM-DD) or press enter to skip: ")
    try:
        due_date = parse_due_date(raw_due)
    except DateFormatError as e:
        logger.debug("Add aborted: %s", e)
        emit("Invalid date format. Please enter in YYYY-MM-DD format.")
        return
    state.task_store.add(description, due_date)


def cmd_view(state: AppState, ask: Ask, emit: Emit) -> None:
    _emit_listing(emit, "Todo List:", render_listing(state.task_store.view_all()))


def cmd_complete(state: AppState, ask: Ask, emit: Emit) -> None:
    index = _ask_index(ask, emit, "Enter the number of the task to mark as completed: ")
    if index is None:
        return
    try:
        state.task_store.mark_completed(index)
    except TaskNotFoundError:
        emit("Task not found.")


def cmd_remove(state: AppState, ask: Ask, emit: Emit) -> None:
    index = _ask_index(ask, emit, "Enter the number of the task to remove: ")
    if index is None:
        return
    try:
        state.task_store.remove(index)
    except TaskNotFoundError:
        emit("Task not found.")


def cmd_view_sorted(state: AppState, ask: Ask, emit: Emit) -> None:
    """Sorts the store itself: a later plain view keeps the date order."""
    state.task_store.sort_by_due_date()
    _emit_listing(emit, "Todo List by date:", render_listing(state.task_store.view_all()))


def cmd_search(state: AppState, ask: Ask, emit: Emit) -> None:
    emit("Todo List, search by keyword:")
    keyword = ask("Enter keyword: ").strip()
    for line in render_listing(state.task_store.search(keyword)):
        emit(line)


def cmd_quit(state: AppState, ask: Ask, emit: Emit) -> None:
    # TaskFileError propagates: a failed save on quit is fatal.
    save_tasks_from_state(state)


registry.register(1, cmd_add, "Add a new task", LoopState.ADDING)
registry.register(2, cmd_view, "View tasks", LoopState.VIEWING)
registry.register(3, cmd_complete, "Mark a task as completed", LoopState.COMPLETING)
registry.register(4, cmd_remove, "Remove a task", LoopState.REMOVING)
registry.register(5, cmd_view_sorted, "View tasks by date order", LoopState.VIEWING_SORTED)
registry.register(6, cmd_search, "Search tasks by keyword", LoopState.SEARCHING)
registry.register(7, cmd_quit, "Save and quit", LoopState.QUITTING)
