from __future__ import annotations

import pytest

from todolist.domain.deadline import DeadlineStatus, classify, describe, minutes_until
from todolist.domain.entities import MILLIS_PER_MINUTE
from todolist.domain.enums import DeadlineCategory

NOW = 1_700_000_000_000


def _at(minutes: int) -> int:
    return NOW + minutes * MILLIS_PER_MINUTE


@pytest.mark.parametrize(
    ("minutes", "expected"),
    [
        (125, DeadlineStatus(DeadlineCategory.HOURS_LEFT, 2)),
        (61, DeadlineStatus(DeadlineCategory.HOURS_LEFT, 1)),
        (30, DeadlineStatus(DeadlineCategory.EXPIRING_SOON)),
        (1, DeadlineStatus(DeadlineCategory.EXPIRING_SOON)),
        (-10, DeadlineStatus(DeadlineCategory.EXPIRED_JUST_NOW)),
        (-59, DeadlineStatus(DeadlineCategory.EXPIRED_JUST_NOW)),
        (-60, DeadlineStatus(DeadlineCategory.EXPIRED_HOURS_AGO, 1)),
        (-130, DeadlineStatus(DeadlineCategory.EXPIRED_HOURS_AGO, 2)),
    ],
)
def test_classify_boundaries(minutes: int, expected: DeadlineStatus) -> None:
    assert classify(_at(minutes), NOW) == expected


def test_zero_minutes_is_expiring_soon_not_expired() -> None:
    assert classify(NOW, NOW) == DeadlineStatus(DeadlineCategory.EXPIRING_SOON)


def test_exactly_one_hour_left_reads_as_expired_one_hour_ago() -> None:
    # 60 matches none of the "left" branches and lands in the expired one.
    assert classify(_at(60), NOW) == DeadlineStatus(DeadlineCategory.EXPIRED_HOURS_AGO, 1)


def test_minutes_truncate_toward_zero() -> None:
    assert minutes_until(NOW - 30_000, NOW) == 0
    assert minutes_until(NOW - 90_000, NOW) == -1
    assert minutes_until(NOW + 119_999, NOW) == 1
    assert classify(NOW - 30_000, NOW).category == DeadlineCategory.EXPIRING_SOON


def test_describe() -> None:
    assert describe(classify(_at(125), NOW)) == "2 hours left"
    assert describe(classify(_at(90), NOW)) == "1 hour left"
    assert describe(classify(_at(5), NOW)) == "Expiring soon"
    assert describe(classify(_at(-5), NOW)) == "Expired just now"
    assert describe(classify(_at(-130), NOW)) == "Expired 2 hours ago"
