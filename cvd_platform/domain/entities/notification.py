"""User-facing notifications emitted by the prediction session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Severity(str, Enum):
    NORMAL = "normal"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    message: str
    severity: Severity = Severity.NORMAL
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
