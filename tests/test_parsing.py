# tests/test_parsing.py

from __future__ import annotations

from datetime import date

import pytest

from todo_cli.core.errors import DateFormatError, ParseError
from todo_cli.core.parsing import parse_due_date, parse_number
from todo_cli.core.render import format_task_line
from todo_cli.tasks.task_models import Task


def test_parse_number() -> None:
    assert parse_number(" 3\n") == 3
    assert parse_number("0") == 0
    assert parse_number("+5") == 5


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "-1", "1_0", "\u0663", "+", "+-1"])
def test_parse_number_rejects(raw: str) -> None:
    with pytest.raises(ParseError):
        parse_number(raw)


def test_parse_due_date() -> None:
    assert parse_due_date("") is None
    assert parse_due_date("   ") is None
    assert parse_due_date("2024-01-15\n") == date(2024, 1, 15)


@pytest.mark.parametrize("raw", ["2024/01/15", "tomorrow", "2024-02-30", "15-01-2024"])
def test_parse_due_date_rejects(raw: str) -> None:
    with pytest.raises(DateFormatError):
        parse_due_date(raw)


def test_format_task_line() -> None:
    assert format_task_line(1, Task("Buy milk")) == "1: [ ] Buy milk (No due date)"
    done = Task("Pay rent", completed=True, due_date=date(2024, 1, 15))
    assert format_task_line(2, done) == "2: [✔] Pay rent (Due: 2024-01-15)"
