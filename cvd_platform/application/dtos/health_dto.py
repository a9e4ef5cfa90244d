"""DTOs for the /health response."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from cvd_platform.domain.entities.health import (
    DependencyCheck,
    ServiceStatus,
    SystemHealth,
)


class DependencyCheckDTO(BaseModel):
    name: str = Field(description="history_slot or scoring_service")
    status: ServiceStatus
    target: str = Field(description="Slot key or scoring endpoint that was checked")
    latency_ms: Optional[float] = None
    error: Optional[str] = Field(
        default=None, description="Failure reported by the check, if any"
    )
    checked_at: datetime

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "scoring_service",
                "status": "down",
                "target": "http://127.0.0.1:5000/predict",
                "latency_ms": None,
                "error": "Prediction server unreachable",
                "checked_at": "2024-09-09T12:00:00Z",
            }
        }
    }


class SystemHealthDTO(BaseModel):
    """Overall status; 'degraded' means predictions or history are limited."""

    status: ServiceStatus
    checks: List[DependencyCheckDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            checks=[
                DependencyCheckDTO(
                    name=check.name,
                    status=check.status,
                    target=check.target,
                    latency_ms=check.latency_ms,
                    error=check.error,
                    checked_at=check.checked_at,
                )
                for check in health.checks
            ],
        )
