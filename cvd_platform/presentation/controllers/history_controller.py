"""
History Router - Presentation Layer

Filtered, paginated history and the remark and delete mutations.
"""

from typing import Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from cvd_platform.application.dtos.prediction_dto import (
    HistoryPageDTO,
    PredictionRecordDTO,
    RemarksUpdateDTO,
)
from cvd_platform.application.use_cases.history_use_cases import (
    DeleteRecordUseCase,
    GetHistoryPageUseCase,
    UpdateRemarksUseCase,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/history", tags=["History"])


@router.get("/", response_model=HistoryPageDTO)
@inject
async def get_history(
    material: Optional[str] = Query(
        None, description="Material tag to filter by (e.g. 'mos2'), or 'all'"
    ),
    prediction: Optional[str] = Query(
        None, description="Outcome label to filter by (e.g. 'excellent'), or 'all'"
    ),
    page: Optional[int] = Query(
        None, ge=1, description="1-based page; clamped to the last page"
    ),
    get_history_page_use_case: GetHistoryPageUseCase = Depends(
        Provide["get_history_page_use_case"]
    ),
) -> HistoryPageDTO:
    """One page of the prediction history, newest first."""
    return await get_history_page_use_case.execute(
        material=material, prediction=prediction, page=page
    )


@router.put("/{record_id}/remarks", response_model=PredictionRecordDTO)
@inject
async def update_remarks(
    record_id: str,
    update: RemarksUpdateDTO,
    update_remarks_use_case: UpdateRemarksUseCase = Depends(
        Provide["update_remarks_use_case"]
    ),
) -> PredictionRecordDTO:
    updated = await update_remarks_use_case.execute(record_id, update.remarks)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Prediction record {record_id} not found",
        )
    return updated


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
@inject
async def delete_record(
    record_id: str,
    delete_record_use_case: DeleteRecordUseCase = Depends(
        Provide["delete_record_use_case"]
    ),
) -> Response:
    """Delete a record. Unknown identifiers are accepted and change nothing."""
    deleted = await delete_record_use_case.execute(record_id)
    if not deleted:
        logger.info("history.delete.unknown_record", record_id=record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
