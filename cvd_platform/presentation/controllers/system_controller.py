"""System endpoint exposing health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from cvd_platform.application.dtos.health_dto import SystemHealthDTO
from cvd_platform.application.use_cases.health_use_cases import (
    GetHealthStatusUseCase,
)
from cvd_platform.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Return the status of the history slot and the scoring service."""
    try:
        health_status = await get_health_status_use_case.execute()
        logger.debug("health.check.success", status=health_status.status.value)
        return health_status
    except Exception as exc:  # pragma: no cover - unexpected health check failure
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc
