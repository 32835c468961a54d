from __future__ import annotations

from collections.abc import Iterable

from .entities import Task
from .enums import Priority, TaskView


def high_priority_only(tasks: Iterable[Task]) -> list[Task]:
    return [task for task in tasks if task.priority == Priority.HIGH]


def medium_or_low_priority(tasks: Iterable[Task]) -> list[Task]:
    return [task for task in tasks if task.priority != Priority.HIGH]


def filter_tasks(tasks: Iterable[Task], view: TaskView = TaskView.ALL) -> list[Task]:
    if view == TaskView.HIGH_PRIORITY:
        return high_priority_only(tasks)
    if view == TaskView.MEDIUM_LOW_PRIORITY:
        return medium_or_low_priority(tasks)
    return list(tasks)
