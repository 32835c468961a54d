from __future__ import annotations

import logging

from todolist.infra.logging import setup_logging


def test_setup_logging_writes_under_given_dir(tmp_path) -> None:
    log_dir = tmp_path / "logs"

    log_file = setup_logging(log_dir, "DEBUG")

    assert log_file == log_dir / "todolist.log"
    assert log_dir.is_dir()
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
