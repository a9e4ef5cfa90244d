"""
Session Router - Presentation Layer

Material selection, the latest outcome and pending notifications of the
prediction session.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from cvd_platform.application.dtos.notification_dto import NotificationDTO
from cvd_platform.application.dtos.prediction_dto import (
    CurrentPredictionDTO,
    MaterialDTO,
    MaterialSelectionDTO,
)
from cvd_platform.application.use_cases.session_use_cases import (
    DrainNotificationsUseCase,
    GetCurrentPredictionUseCase,
    ListMaterialsUseCase,
    SelectMaterialUseCase,
)

router = APIRouter(tags=["Session"])


@router.get("/materials", response_model=List[MaterialDTO])
@inject
async def list_materials(
    list_materials_use_case: ListMaterialsUseCase = Depends(
        Provide["list_materials_use_case"]
    ),
) -> List[MaterialDTO]:
    """Materials available for prediction and the remote model they use."""
    return await list_materials_use_case.execute()


@router.put("/session/material", response_model=MaterialSelectionDTO)
@inject
async def select_material(
    selection: MaterialSelectionDTO,
    select_material_use_case: SelectMaterialUseCase = Depends(
        Provide["select_material_use_case"]
    ),
) -> MaterialSelectionDTO:
    """Select the material for the next submission."""
    material = await select_material_use_case.execute(selection.material)
    return MaterialSelectionDTO(material=material)


@router.get("/predictions/current", response_model=CurrentPredictionDTO)
@inject
async def get_current_prediction(
    get_current_prediction_use_case: GetCurrentPredictionUseCase = Depends(
        Provide["get_current_prediction_use_case"]
    ),
) -> CurrentPredictionDTO:
    current = await get_current_prediction_use_case.execute()
    if current is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No prediction for the selected material yet",
        )
    return current


@router.get("/notifications", response_model=List[NotificationDTO])
@inject
async def drain_notifications(
    drain_notifications_use_case: DrainNotificationsUseCase = Depends(
        Provide["drain_notifications_use_case"]
    ),
) -> List[NotificationDTO]:
    """Return pending notifications, oldest first, and clear them."""
    return await drain_notifications_use_case.execute()
