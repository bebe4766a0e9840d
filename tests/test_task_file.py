# tests/test_task_file.py

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from todo_cli.core.errors import TaskFileError
from todo_cli.tasks.task_file import TaskFile
from todo_cli.tasks.task_models import Task


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert TaskFile(tmp_path / "todos.json").load() == []


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    tasks = [
        Task("Buy milk"),
        Task("Pay rent", completed=True, due_date=date(2024, 1, 15)),
        Task("Ünïcode ✔"),
    ]

    TaskFile(path).save(tasks)
    assert TaskFile(path).load() == tasks
    assert not path.with_name("todos.json.tmp").exists()


def test_saved_format(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    TaskFile(path).save([Task("a", due_date=date(2024, 2, 3)), Task("b", completed=True)])

    assert json.loads(path.read_text("utf-8")) == [
        {"task": "a", "completed": False, "due_date": "2024-02-03"},
        {"task": "b", "completed": True, "due_date": None},
    ]


def test_save_replaces_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    tf = TaskFile(path)
    tf.save([Task("a"), Task("b"), Task("c")])
    tf.save([Task("only")])
    assert [t.description for t in tf.load()] == ["only"]


def test_load_accepts_description_alias_and_missing_due_date(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    path.write_text(json.dumps([{"description": "x", "completed": False}]), "utf-8")
    assert TaskFile(path).load() == [Task("x")]


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"task": "a", "completed": False}),
        json.dumps([{"task": "a"}]),
        json.dumps([{"task": "a", "completed": "yes"}]),
        json.dumps([{"task": 3, "completed": False}]),
        json.dumps([{"task": "a", "completed": False, "due_date": "15/01/2024"}]),
        json.dumps([{"task": "a", "completed": False, "due_date": 20240115}]),
        json.dumps(["a"]),
        "[" * 100000 + "]" * 100000,
    ],
)
def test_malformed_file_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "todos.json"
    path.write_text(content, "utf-8")
    with pytest.raises(TaskFileError) as exc:
        TaskFile(path).load()
    assert exc.value.path == path


def test_save_failure_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")
    with pytest.raises(TaskFileError):
        TaskFile(blocker / "todos.json").save([Task("a")])


def test_unencodable_description_fails_save_and_cleans_up(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    with pytest.raises(TaskFileError):
        TaskFile(path).save([Task("bad \udcff")])
    assert list(tmp_path.iterdir()) == []
