from __future__ import annotations

import time
from dataclasses import dataclass

from .enums import Priority

MILLIS_PER_MINUTE = 60 * 1000
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE


@dataclass(frozen=True)
class Task:
    id: int
    name: str
    deadline: int
    priority: Priority


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def deadline_from_hours(hours: int, now: int | None = None) -> int:
    base = now_millis() if now is None else now
    return base + hours * MILLIS_PER_HOUR
