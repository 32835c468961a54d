from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from todolist.domain.entities import Task
from todolist.domain.enums import Priority

from .task_store import TaskStore

logger = logging.getLogger(__name__)

Post = Callable[[Callable[[], None]], None]


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


class BackgroundWriter:
    """Runs store writes off the caller's thread.

    ``post`` hands completion callbacks back to the foreground; a UI passes
    its event-loop scheduler here. Without one, callbacks run on the worker.
    """

    def __init__(self, store: TaskStore, post: Post | None = None) -> None:
        self._store = store
        self._post = post or _run_inline
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="task-writer")

    def submit_insert(
        self,
        name: str,
        deadline: int,
        priority: Priority | str,
        on_done: Callable[[Task], None] | None = None,
        on_error: Callable[[BaseException], None] | None = None,
    ) -> Future:
        future = self._executor.submit(self._store.insert, name, deadline, priority)
        self._attach(future, on_done, on_error)
        return future

    def submit_add(
        self,
        name: str,
        hours: int | str,
        priority: Priority | str = Priority.LOW,
        on_done: Callable[[Task], None] | None = None,
        on_error: Callable[[BaseException], None] | None = None,
    ) -> Future:
        future = self._executor.submit(self._store.add_task, name, hours, priority)
        self._attach(future, on_done, on_error)
        return future

    def submit_delete(
        self,
        task_id: int,
        on_done: Callable[[None], None] | None = None,
        on_error: Callable[[BaseException], None] | None = None,
    ) -> Future:
        future = self._executor.submit(self._store.delete, task_id)
        self._attach(future, on_done, on_error)
        return future

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _attach(
        self,
        future: Future,
        on_done: Callable[[Any], None] | None,
        on_error: Callable[[BaseException], None] | None,
    ) -> None:
        if on_done is None and on_error is None:
            return

        def _complete(done: Future) -> None:
            exc = done.exception()
            if exc is not None:
                if on_error is None:
                    logger.error("Background write failed: %s", exc)
                    return
                self._post(lambda: on_error(exc))
            elif on_done is not None:
                result = done.result()
                self._post(lambda: on_done(result))

        future.add_done_callback(_complete)
