"""Notification ports used to surface results and errors to the user."""

from __future__ import annotations

from typing import List, Protocol

from cvd_platform.domain.entities.notification import Notification, Severity


class INotifier(Protocol):
    """Fire-and-forget sink for short user-facing messages."""

    def notify(
        self, title: str, message: str, severity: Severity = Severity.NORMAL
    ) -> None:
        ...


class INotificationFeed(INotifier, Protocol):
    """Notifier that keeps messages until a client collects them."""

    def drain(self) -> List[Notification]:
        ...
