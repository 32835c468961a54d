from __future__ import annotations

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from todolist.config import SETTINGS

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Writes run on a background worker thread.
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, autocommit=False, expire_on_commit=False)


engine = create_db_engine(SETTINGS.database_url)
SessionLocal = make_session_factory(engine)


def init_db(bind: Engine | None = None) -> None:
    # Register the mapped tables on Base.metadata.
    from . import models  # noqa: F401

    bind = bind or engine
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))
    Base.metadata.create_all(bind)
