from __future__ import annotations

import pytest

from todolist.infra.db import create_db_engine, init_db, make_session_factory
from todolist.infra.repository import TaskRepository
from todolist.services.task_store import TaskStore


@pytest.fixture
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repo(engine) -> TaskRepository:
    return TaskRepository(make_session_factory(engine))


@pytest.fixture
def store(repo) -> TaskStore:
    return TaskStore(repo)
