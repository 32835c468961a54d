from __future__ import annotations

from sqlalchemy import BigInteger, CheckConstraint, Column, Integer, String, Text

from todolist.domain.enums import Priority

from .db import Base

PRIORITY_VALUES = ", ".join(f"'{priority.value}'" for priority in Priority)


class TaskModel(Base):
    __tablename__ = "tasks"
    __table_args__ = (
        CheckConstraint(f"priority IN ({PRIORITY_VALUES})", name="ck_tasks_priority"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    deadline = Column(BigInteger, nullable=False)
    priority = Column(String(10), nullable=False)
