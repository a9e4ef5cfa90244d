"""
Predictions Router - Presentation Layer

Submission endpoint of the prediction session.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from cvd_platform.application.dtos.prediction_dto import (
    PredictionRecordDTO,
    PredictionRequestDTO,
    PredictionResponseDTO,
    ValidationFailureDTO,
)
from cvd_platform.application.use_cases.prediction_use_case import (
    SubmissionState,
    SubmitPredictionUseCase,
)
from cvd_platform.domain.entities.errors import (
    ParameterValidationError,
    PredictionInProgressError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/predictions", tags=["Predictions"])


@router.post(
    "/",
    response_model=PredictionResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def submit_prediction(
    request: PredictionRequestDTO,
    submit_prediction_use_case: SubmitPredictionUseCase = Depends(
        Provide["submit_prediction_use_case"]
    ),
) -> PredictionResponseDTO:
    """
    Predict the synthesis outcome for a set of CVD parameters.

    The result is prepended to the history. When the scoring service is
    unreachable the outcome is simulated (state "degraded") unless the
    service runs with the "fail" policy.
    """
    try:
        result = await submit_prediction_use_case.execute(
            request.params.to_domain(), request.material
        )
        if result.state == SubmissionState.REJECTED and result.failure is not None:
            result.failure.raise_for_failure()
    except PredictionInProgressError as e:
        logger.warning("predictions.submit.busy", error=e.message)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
    except ParameterValidationError as e:
        failure = ValidationFailureDTO(field=e.field, message=e.message)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=failure.model_dump(),
        )

    if result.state == SubmissionState.FAILED or result.record is None:
        logger.error("predictions.submit.failed", error=result.error)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=result.error or "Prediction server unavailable",
        )

    return PredictionResponseDTO(
        state=result.state.value,
        simulated=result.simulated,
        persisted=result.persisted,
        record=PredictionRecordDTO.from_domain(result.record),
    )
