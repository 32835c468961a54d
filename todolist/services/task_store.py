from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError

from todolist.domain.entities import Task, deadline_from_hours
from todolist.domain.enums import Priority
from todolist.domain.errors import StorageUnavailable, ValidationError
from todolist.infra.repository import TaskRepository

logger = logging.getLogger(__name__)

Snapshot = tuple[Task, ...]
Listener = Callable[[Snapshot], None]


class Subscription:
    def __init__(self, store: TaskStore, listener: Listener) -> None:
        self._store = store
        self.listener = listener
        self.closed = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._store.unsubscribe(self)


def _coerce_priority(priority: Priority | str) -> Priority:
    if isinstance(priority, Priority):
        return priority
    try:
        return Priority(priority)
    except ValueError as exc:
        raise ValidationError(f"Unknown priority: {priority!r}") from exc


def _parse_hours(hours: int | str) -> int:
    if isinstance(hours, str):
        try:
            hours = int(hours.strip())
        except ValueError as exc:
            raise ValidationError(f"Deadline hours must be a whole number: {hours!r}") from exc
    if isinstance(hours, bool) or not isinstance(hours, int):
        raise ValidationError(f"Deadline hours must be a whole number: {hours!r}")
    if hours < 0:
        raise ValidationError("Deadline hours must not be negative")
    return hours


class TaskStore:
    """
    Owner of the persisted task collection.

    Writes are serialized under one lock, so ids come out of the database in
    commit order. After every successful write the full collection is re-read
    and published to subscribers as an immutable tuple.

    Reads and subscriber registration take the same lock, so the stored
    snapshot only moves forward. The read side never raises: when the
    database cannot be read, the last published snapshot is returned instead.
    """

    def __init__(self, repo: TaskRepository | None = None) -> None:
        self._repo = repo or TaskRepository()
        self._write_lock = threading.RLock()
        self._listeners_lock = threading.Lock()
        self._subscriptions: list[Subscription] = []
        self._snapshot: Snapshot = ()
        self.list_all()
        logger.info("TaskStore ready total=%s", len(self._snapshot))

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def insert(self, name: str, deadline: int, priority: Priority | str) -> Task:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Task name must not be blank")
        if isinstance(deadline, bool) or not isinstance(deadline, int):
            raise ValidationError(f"Deadline must be an integer timestamp: {deadline!r}")
        priority = _coerce_priority(priority)

        with self._write_lock:
            try:
                task = self._repo.create_task(name, deadline, priority)
            except SQLAlchemyError as exc:
                logger.exception("Failed to insert task name=%r", name)
                raise StorageUnavailable("Could not save the task") from exc
            logger.info("Task inserted id=%s priority=%s", task.id, task.priority.value)
            self._refresh(fallback=self._snapshot + (task,))
        return task

    def add_task(
        self,
        name: str,
        hours: int | str,
        priority: Priority | str = Priority.LOW,
        now: int | None = None,
    ) -> Task:
        return self.insert(name, deadline_from_hours(_parse_hours(hours), now), priority)

    def delete(self, task_id: int) -> None:
        with self._write_lock:
            try:
                removed = self._repo.delete_task(task_id)
            except SQLAlchemyError as exc:
                logger.exception("Failed to delete task id=%s", task_id)
                raise StorageUnavailable("Could not remove the task") from exc
            if not removed:
                logger.debug("Delete ignored, no task id=%s", task_id)
                return
            logger.info("Task deleted id=%s", task_id)
            self._refresh(fallback=tuple(t for t in self._snapshot if t.id != task_id))

    def list_all(self) -> list[Task]:
        with self._write_lock:
            try:
                tasks = self._repo.list_tasks()
            except SQLAlchemyError:
                logger.exception("Task list unavailable, serving last snapshot")
                return list(self._snapshot)
            self._snapshot = tuple(tasks)
            return tasks

    def subscribe_all(self, listener: Listener) -> Subscription:
        subscription = Subscription(self, listener)
        # No write may publish between registration and first delivery.
        with self._write_lock:
            snapshot = tuple(self.list_all())
            with self._listeners_lock:
                self._subscriptions.append(subscription)
            self._notify_one(listener, snapshot)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._listeners_lock:
            self._subscriptions = [s for s in self._subscriptions if s is not subscription]

    def _refresh(self, fallback: Snapshot) -> None:
        try:
            self._snapshot = tuple(self._repo.list_tasks())
        except SQLAlchemyError:
            logger.exception("Task list unavailable after write, publishing local snapshot")
            self._snapshot = fallback
        self._publish(self._snapshot)

    def _publish(self, snapshot: Snapshot) -> None:
        with self._listeners_lock:
            subscriptions = list(self._subscriptions)
        for subscription in subscriptions:
            self._notify_one(subscription.listener, snapshot)

    @staticmethod
    def _notify_one(listener: Listener, snapshot: Snapshot) -> None:
        try:
            listener(snapshot)
        except Exception:  # noqa: BLE001
            logger.exception("Task listener failed")
