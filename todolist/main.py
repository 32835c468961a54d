from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence

from todolist.domain.deadline import classify, describe
from todolist.domain.entities import Task, now_millis
from todolist.domain.enums import Priority, TaskView
from todolist.domain.errors import TaskStoreError
from todolist.domain.filters import filter_tasks
from todolist.infra.db import init_db
from todolist.infra.logging import setup_logging
from todolist.services.dispatcher import BackgroundWriter
from todolist.services.task_store import TaskStore

logger = logging.getLogger(__name__)

PRIORITY_LABELS = {
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}


def format_task(task: Task, now: int) -> str:
    status = describe(classify(task.deadline, now))
    return f"{task.id:>4}  {task.name}  {status} - {PRIORITY_LABELS[task.priority]}"


def render(tasks: Iterable[Task], now: int | None = None) -> list[str]:
    now = now_millis() if now is None else now
    return [format_task(task, now) for task in tasks]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todolist", description="Local to-do list.")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="add a task")
    add.add_argument("name")
    add.add_argument("hours", help="deadline in hours from now")
    add.add_argument(
        "--priority",
        choices=[priority.value for priority in Priority],
        default=Priority.LOW.value,
        type=str.upper,
    )

    show = commands.add_parser("list", help="list tasks")
    show.add_argument(
        "--view",
        choices=[view.value for view in TaskView],
        default=TaskView.ALL.value,
    )

    delete = commands.add_parser("delete", help="remove a task")
    delete.add_argument("task_id", type=int)
    return parser


def run(args: argparse.Namespace, store: TaskStore) -> int:
    if args.command == "list":
        for line in render(filter_tasks(store.list_all(), TaskView(args.view))):
            print(line)
        return 0

    writer = BackgroundWriter(store)
    try:
        if args.command == "add":
            writer.submit_add(args.name, args.hours, Priority(args.priority)).result()
            print("Task added")
        else:
            writer.submit_delete(args.task_id).result()
            print("Task removed")
    except TaskStoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        writer.shutdown()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    try:
        init_db()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Database initialization failed")
        print(f"DB error: {exc}", file=sys.stderr)
        return 1
    return run(args, TaskStore())


if __name__ == "__main__":
    sys.exit(main())
