from __future__ import annotations

from cvd_platform.domain.entities.notification import Severity
from cvd_platform.infrastructure.notifications import NotificationFeed


def test_notifications_are_buffered_until_drained() -> None:
    feed = NotificationFeed()

    feed.notify("Record Deleted", "Prediction record has been removed from history.")
    feed.notify("Network Error", "down", Severity.DESTRUCTIVE)

    drained = feed.drain()
    assert [n.title for n in drained] == ["Record Deleted", "Network Error"]
    assert drained[0].severity is Severity.NORMAL
    assert drained[1].severity is Severity.DESTRUCTIVE
    assert feed.drain() == []


def test_oldest_notifications_drop_when_full() -> None:
    feed = NotificationFeed(max_pending=2)

    for i in range(3):
        feed.notify("Prediction Complete", f"Result: {i}")

    assert [n.message for n in feed.drain()] == ["Result: 1", "Result: 2"]
