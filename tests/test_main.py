from __future__ import annotations

from todolist.domain.entities import MILLIS_PER_MINUTE, Task
from todolist.domain.enums import Priority
from todolist.main import build_parser, format_task, run
from todolist.services.task_store import TaskStore

NOW = 1_700_000_000_000


def test_format_task() -> None:
    task = Task(id=7, name="Call bank", deadline=NOW + 125 * MILLIS_PER_MINUTE, priority=Priority.HIGH)
    assert format_task(task, NOW) == "   7  Call bank  2 hours left - High"


def test_add_list_delete(store: TaskStore, capsys) -> None:
    parser = build_parser()

    assert run(parser.parse_args(["add", "Buy milk", "1"]), store) == 0
    assert run(parser.parse_args(["add", "Call bank", "5", "--priority", "high"]), store) == 0
    assert "Task added" in capsys.readouterr().out

    assert run(parser.parse_args(["list", "--view", "high"]), store) == 0
    out = capsys.readouterr().out
    assert "Call bank" in out
    assert "Buy milk" not in out

    milk = store.list_all()[0]
    assert run(parser.parse_args(["delete", str(milk.id)]), store) == 0
    assert "Task removed" in capsys.readouterr().out
    assert [t.name for t in store.list_all()] == ["Call bank"]


def test_add_with_bad_hours_fails(store: TaskStore, capsys) -> None:
    args = build_parser().parse_args(["add", "Buy milk", "soon"])

    assert run(args, store) == 1
    assert "Error:" in capsys.readouterr().err
    assert store.list_all() == []
