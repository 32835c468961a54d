from __future__ import annotations

from dataclasses import dataclass

from .entities import MILLIS_PER_MINUTE, now_millis
from .enums import DeadlineCategory

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class DeadlineStatus:
    category: DeadlineCategory
    magnitude: int | None = None


def minutes_until(deadline: int, now: int) -> int:
    """Whole minutes from ``now`` to ``deadline``, truncated toward zero."""
    delta = deadline - now
    minutes = abs(delta) // MILLIS_PER_MINUTE
    return -minutes if delta < 0 else minutes


def classify(deadline: int, now: int | None = None) -> DeadlineStatus:
    if now is None:
        now = now_millis()
    minutes = minutes_until(deadline, now)

    if minutes > MINUTES_PER_HOUR:
        return DeadlineStatus(DeadlineCategory.HOURS_LEFT, minutes // MINUTES_PER_HOUR)
    if 1 <= minutes < MINUTES_PER_HOUR or minutes == 0:
        return DeadlineStatus(DeadlineCategory.EXPIRING_SOON)

    hours_expired = abs(minutes) // MINUTES_PER_HOUR
    if hours_expired == 0:
        return DeadlineStatus(DeadlineCategory.EXPIRED_JUST_NOW)
    return DeadlineStatus(DeadlineCategory.EXPIRED_HOURS_AGO, hours_expired)


def _hours(count: int) -> str:
    return f"{count} hour" if count == 1 else f"{count} hours"


def describe(status: DeadlineStatus) -> str:
    if status.category == DeadlineCategory.HOURS_LEFT:
        return f"{_hours(status.magnitude)} left"
    if status.category == DeadlineCategory.EXPIRING_SOON:
        return "Expiring soon"
    if status.category == DeadlineCategory.EXPIRED_JUST_NOW:
        return "Expired just now"
    return f"Expired {_hours(status.magnitude)} ago"
