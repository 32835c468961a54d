from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from todolist.domain.entities import Task
from todolist.domain.enums import Priority

from .db import SessionLocal
from .models import TaskModel


def _to_entity(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        name=model.name,
        deadline=model.deadline,
        priority=Priority(model.priority),
    )


class TaskRepository:
    def __init__(self, session_factory: sessionmaker | None = None) -> None:
        self._session_factory = session_factory or SessionLocal

    def list_tasks(self) -> list[Task]:
        with self._session_factory() as session:
            stmt = select(TaskModel).order_by(TaskModel.id.asc())
            return [_to_entity(task) for task in session.scalars(stmt)]

    def create_task(self, name: str, deadline: int, priority: Priority) -> Task:
        with self._session_factory() as session:
            task = TaskModel(name=name, deadline=deadline, priority=priority.value)
            session.add(task)
            session.commit()
            session.refresh(task)
            return _to_entity(task)

    def delete_task(self, task_id: int) -> bool:
        with self._session_factory() as session:
            task = session.get(TaskModel, task_id)
            if not task:
                return False
            session.delete(task)
            session.commit()
            return True
