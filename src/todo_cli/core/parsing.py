# src/todo_cli/core/parsing.py

from __future__ import annotations

from datetime import date, datetime

from ..tasks.task_models import DATE_FORMAT
from .errors import DateFormatError, ParseError


def parse_number(raw: str) -> int:
    """Parse a menu choice or task number. Negative values are not numbers here."""
    text = raw.strip()
    digits = text[1:] if text.startswith("+") else text
    # int() alone would also take "1_0" and non-ASCII digits.
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(raw)
    return int(digits)


def parse_due_date(raw: str) -> date | None:
    """Blank -> None (no due date); otherwise strict YYYY-MM-DD."""
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        raise DateFormatError(text) from None
