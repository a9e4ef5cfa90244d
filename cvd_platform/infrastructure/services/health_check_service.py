"""Health check service for the durable slot and the scoring endpoint."""

from __future__ import annotations

import time

import structlog

from cvd_platform.domain.entities.errors import HistoryReadError, ScoringServiceError
from cvd_platform.domain.entities.health import (
    DependencyCheck,
    ServiceStatus,
    SystemHealth,
)
from cvd_platform.domain.gateways.scoring_gateway import IScoringGateway
from cvd_platform.domain.ports.key_value_slot import IKeyValueSlot

logger = structlog.get_logger(__name__)


class HealthCheckService:
    """Checks the history slot and the scoring service, one after the other."""

    def __init__(
        self,
        slot: IKeyValueSlot,
        scoring_gateway: IScoringGateway,
        slot_key: str,
        scoring_url: str,
    ) -> None:
        self._slot = slot
        self._scoring_gateway = scoring_gateway
        self._slot_key = slot_key
        self._scoring_url = scoring_url

    async def evaluate(self) -> SystemHealth:
        health = SystemHealth.from_checks(
            [await self._check_slot(), await self._check_scoring_service()]
        )
        if health.status != ServiceStatus.UP:
            logger.info(
                "health.degraded",
                failing=[check.name for check in health.checks if not check.available],
            )
        return health

    async def _check_slot(self) -> DependencyCheck:
        started = time.perf_counter()
        try:
            await self._slot.ping()
        except HistoryReadError as exc:
            logger.warning("health.slot.unavailable", error=exc.message)
            return DependencyCheck(
                name="history_slot",
                status=ServiceStatus.DOWN,
                target=self._slot_key,
                error=exc.message,
            )
        return DependencyCheck(
            name="history_slot",
            status=ServiceStatus.UP,
            target=self._slot_key,
            latency_ms=(time.perf_counter() - started) * 1000,
        )

    async def _check_scoring_service(self) -> DependencyCheck:
        try:
            latency = await self._scoring_gateway.ping()
        except ScoringServiceError as exc:
            logger.warning("health.scoring.unavailable", error=exc.message)
            return DependencyCheck(
                name="scoring_service",
                status=ServiceStatus.DOWN,
                target=self._scoring_url,
                error=exc.message,
            )
        return DependencyCheck(
            name="scoring_service",
            status=ServiceStatus.UP,
            target=self._scoring_url,
            latency_ms=latency,
        )
