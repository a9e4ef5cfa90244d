"""
DTOs Package - Application Layer

Data Transfer Objects exchanged between the application layer and the
presentation layer.
"""

from .health_dto import DependencyCheckDTO, SystemHealthDTO
from .notification_dto import NotificationDTO
from .prediction_dto import (
    CurrentPredictionDTO,
    HistoryPageDTO,
    MaterialDTO,
    MaterialSelectionDTO,
    OutcomeDTO,
    PredictionParamsDTO,
    PredictionRecordDTO,
    PredictionRequestDTO,
    PredictionResponseDTO,
    RemarksUpdateDTO,
    ValidationFailureDTO,
)

__all__ = [
    "CurrentPredictionDTO",
    "DependencyCheckDTO",
    "HistoryPageDTO",
    "MaterialDTO",
    "MaterialSelectionDTO",
    "NotificationDTO",
    "OutcomeDTO",
    "PredictionParamsDTO",
    "PredictionRecordDTO",
    "PredictionRequestDTO",
    "PredictionResponseDTO",
    "RemarksUpdateDTO",
    "SystemHealthDTO",
    "ValidationFailureDTO",
]
