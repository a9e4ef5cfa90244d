from __future__ import annotations

import pytest

from cvd_platform.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from cvd_platform.domain.entities.health import (
    DependencyCheck,
    ServiceStatus,
    SystemHealth,
)
from cvd_platform.presentation.controllers.system_controller import health


class _HealthService:
    def __init__(self, status: ServiceStatus):
        self._health = SystemHealth.from_checks(
            [DependencyCheck(name="history_slot", status=status, target="cvd_history")]
        )

    async def evaluate(self) -> SystemHealth:
        return self._health


@pytest.mark.asyncio
async def test_health_endpoint_returns_status():
    dto = await health(
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.UP)
        )
    )
    assert dto.status is ServiceStatus.UP
    assert dto.checks[0].name == "history_slot"


@pytest.mark.asyncio
async def test_health_endpoint_reports_degradation():
    dto = await health(
        get_health_status_use_case=GetHealthStatusUseCase(
            _HealthService(ServiceStatus.DOWN)
        )
    )
    assert dto.status is ServiceStatus.DEGRADED
    assert dto.checks[0].status is ServiceStatus.DOWN
