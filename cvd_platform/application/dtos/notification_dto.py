"""DTO for notifications collected by clients."""

from datetime import datetime

from pydantic import BaseModel

from cvd_platform.domain.entities.notification import Notification, Severity


class NotificationDTO(BaseModel):
    title: str
    message: str
    severity: Severity
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationDTO":
        return cls(
            title=notification.title,
            message=notification.message,
            severity=notification.severity,
            created_at=notification.created_at,
        )
