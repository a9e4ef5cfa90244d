"""
Notification feed.

Buffers user-facing notifications until a client collects them, and mirrors
each one to the structured log.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List

import structlog

from cvd_platform.domain.entities.notification import Notification, Severity

logger = structlog.get_logger(__name__)


class NotificationFeed:
    """Bounded in-memory notifier; oldest entries drop off when full."""

    def __init__(self, max_pending: int = 50):
        self._pending: Deque[Notification] = deque(maxlen=max_pending)

    def notify(
        self, title: str, message: str, severity: Severity = Severity.NORMAL
    ) -> None:
        notification = Notification(title=title, message=message, severity=severity)
        self._pending.append(notification)
        log = logger.warning if severity == Severity.DESTRUCTIVE else logger.info
        log(
            "notification.emitted",
            title=title,
            message=message,
            severity=severity.value,
        )

    def drain(self) -> List[Notification]:
        """Return pending notifications oldest first and forget them."""
        drained = list(self._pending)
        self._pending.clear()
        return drained
