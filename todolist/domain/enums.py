from __future__ import annotations

from enum import StrEnum


class Priority(StrEnum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class DeadlineCategory(StrEnum):
    HOURS_LEFT = "hours_left"
    EXPIRING_SOON = "expiring_soon"
    EXPIRED_JUST_NOW = "expired_just_now"
    EXPIRED_HOURS_AGO = "expired_hours_ago"


class TaskView(StrEnum):
    ALL = "all"
    HIGH_PRIORITY = "high"
    MEDIUM_LOW_PRIORITY = "medium-low"
