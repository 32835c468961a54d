from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from todolist.config import SETTINGS, PROJECT_ROOT


def setup_logging(log_dir: Path | None = None, level: str | None = None) -> Path:
    log_dir = log_dir or PROJECT_ROOT / SETTINGS.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "todolist.log"

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s [%(threadName)s] %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    # Console shows warnings only; INFO and below go to the file.
    console_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=(level or SETTINGS.log_level).upper(),
        handlers=[file_handler, console_handler],
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return log_file
