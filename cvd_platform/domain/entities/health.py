"""
Health of the prediction session's collaborators.

The durable history slot and the scoring service are both optional for a
working session: without the slot history is not retained, without the
scoring service outcomes are simulated. A failing check therefore degrades
the system and never takes it down.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Sequence, Tuple


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Result of probing one collaborator."""

    name: str
    status: ServiceStatus
    target: str
    latency_ms: Optional[float] = None
    error: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def available(self) -> bool:
        return self.status == ServiceStatus.UP


@dataclass(frozen=True, slots=True)
class SystemHealth:
    status: ServiceStatus
    checks: Tuple[DependencyCheck, ...] = ()

    @classmethod
    def from_checks(cls, checks: Sequence[DependencyCheck]) -> "SystemHealth":
        status = (
            ServiceStatus.UP
            if all(check.available for check in checks)
            else ServiceStatus.DEGRADED
        )
        return cls(status=status, checks=tuple(checks))
