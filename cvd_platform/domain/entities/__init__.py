"""
Domain entities.

Plain dataclasses and enums describing materials, synthesis parameters,
prediction records and the errors raised around them.
"""

from .errors import (
    DomainError,
    HistoryReadError,
    HistoryWriteError,
    ParameterValidationError,
    PredictionInProgressError,
    ScoringServiceError,
    ScoringServiceStatusError,
    SlotCapacityError,
)
from .material import (
    DEFAULT_MATERIAL,
    DEFAULT_MATERIAL_CODES,
    MATERIAL_CATALOGUE,
    Material,
    MaterialInfo,
    PressureType,
    SaltAddition,
    SubstratePosition,
    SubstrateType,
)
from .notification import Notification, Severity
from .prediction import (
    CANONICAL_LABELS,
    PARAM_WIRE_NAMES,
    KnownOutcome,
    Outcome,
    OutcomeLabel,
    PredictionParams,
    PredictionRecord,
    UnrecognizedOutcome,
    outcome_tone,
    parse_outcome,
)

__all__ = [
    "CANONICAL_LABELS",
    "DEFAULT_MATERIAL",
    "DEFAULT_MATERIAL_CODES",
    "DomainError",
    "HistoryReadError",
    "HistoryWriteError",
    "KnownOutcome",
    "MATERIAL_CATALOGUE",
    "Material",
    "MaterialInfo",
    "Notification",
    "Outcome",
    "OutcomeLabel",
    "PARAM_WIRE_NAMES",
    "ParameterValidationError",
    "PredictionInProgressError",
    "PredictionParams",
    "PredictionRecord",
    "PressureType",
    "SaltAddition",
    "ScoringServiceError",
    "ScoringServiceStatusError",
    "Severity",
    "SlotCapacityError",
    "SubstratePosition",
    "SubstrateType",
    "UnrecognizedOutcome",
    "outcome_tone",
    "parse_outcome",
]
