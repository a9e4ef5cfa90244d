"""
Application DTOs - Prediction

Request and response models for submitting predictions and reading the
prediction history. Parameter fields accept both snake_case and the
camelCase names used by the scoring service.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

from cvd_platform.domain.entities.material import Material, MaterialInfo
from cvd_platform.domain.entities.prediction import (
    KnownOutcome,
    Outcome,
    PredictionParams,
    PredictionRecord,
    outcome_tone,
)


class PredictionParamsDTO(BaseModel):
    """Synthesis parameters; every field may be missing until validation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    substrate_type: Optional[str] = Field(default=None, examples=["Sapphire"])
    metal_chalcogen_ratio: Optional[float] = Field(default=None, examples=[0.5])
    h_ar_ratio: Optional[float] = Field(default=None, examples=[0.1])
    pressure_type: Optional[str] = Field(
        default=None, examples=["atmospheric pressure"]
    )
    metal_temperature: Optional[int] = Field(default=None, examples=[850])
    chalcogen_temperature: Optional[int] = Field(default=None, examples=[200])
    substrate_position: Optional[str] = Field(default=None, examples=["top"])
    reaction_time: Optional[int] = Field(default=None, examples=[15])
    salt_addition: Optional[str] = Field(default=None, examples=["yes"])

    @field_validator("*", mode="wrap")
    @classmethod
    def _unparsable_as_missing(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Any:
        # Malformed values are reported by the parameter validator, in field order.
        try:
            return handler(value)
        except ValidationError:
            return None

    def to_domain(self) -> PredictionParams:
        return PredictionParams(
            substrate_type=self.substrate_type or "",
            metal_chalcogen_ratio=self.metal_chalcogen_ratio,
            h_ar_ratio=self.h_ar_ratio,
            pressure_type=self.pressure_type or "",
            metal_temperature=self.metal_temperature,
            chalcogen_temperature=self.chalcogen_temperature,
            substrate_position=self.substrate_position or "",
            reaction_time=self.reaction_time,
            salt_addition=self.salt_addition or "",
        )

    @classmethod
    def from_domain(cls, params: PredictionParams) -> "PredictionParamsDTO":
        return cls(
            substrate_type=params.substrate_type,
            metal_chalcogen_ratio=params.metal_chalcogen_ratio,
            h_ar_ratio=params.h_ar_ratio,
            pressure_type=params.pressure_type,
            metal_temperature=params.metal_temperature,
            chalcogen_temperature=params.chalcogen_temperature,
            substrate_position=params.substrate_position,
            reaction_time=params.reaction_time,
            salt_addition=params.salt_addition,
        )


class PredictionRequestDTO(BaseModel):
    """Payload for POST /predictions."""

    material: Optional[Material] = Field(
        default=None,
        description="Material to predict for; defaults to the session's selection",
    )
    params: PredictionParamsDTO


class OutcomeDTO(BaseModel):
    label: str = Field(description="Label as returned by the scoring service")
    recognized: bool = Field(description="Whether the label is a known outcome")
    tone: str = Field(description="Styling bucket: success, warning, danger, neutral")

    @classmethod
    def from_domain(cls, outcome: Outcome) -> "OutcomeDTO":
        return cls(
            label=outcome.value,
            recognized=isinstance(outcome, KnownOutcome),
            tone=outcome_tone(outcome),
        )


class PredictionRecordDTO(BaseModel):
    id: str
    material: Material
    params: PredictionParamsDTO
    prediction: OutcomeDTO
    timestamp: datetime
    remarks: Optional[str] = None

    @classmethod
    def from_domain(cls, record: PredictionRecord) -> "PredictionRecordDTO":
        return cls(
            id=record.id,
            material=record.material,
            params=PredictionParamsDTO.from_domain(record.params),
            prediction=OutcomeDTO.from_domain(record.prediction),
            timestamp=record.timestamp,
            remarks=record.remarks,
        )


class PredictionResponseDTO(BaseModel):
    """Result of a submission that produced a record."""

    state: str = Field(description="succeeded, or degraded when simulated")
    simulated: bool
    persisted: bool = Field(description="Whether the history write succeeded")
    record: PredictionRecordDTO


class ValidationFailureDTO(BaseModel):
    field: str
    message: str


class CurrentPredictionDTO(BaseModel):
    material: Material
    prediction: OutcomeDTO


class MaterialSelectionDTO(BaseModel):
    material: Material


class MaterialDTO(BaseModel):
    value: Material
    label: str
    full_name: str
    ratio: str
    metal: str
    chalcogen: str
    remote_code: str
    selected: bool = False

    @classmethod
    def from_domain(
        cls, material: Material, info: MaterialInfo, remote_code: str, selected: bool
    ) -> "MaterialDTO":
        return cls(
            value=material,
            label=info.label,
            full_name=info.full_name,
            ratio=info.ratio,
            metal=info.metal,
            chalcogen=info.chalcogen,
            remote_code=remote_code,
            selected=selected,
        )


class RemarksUpdateDTO(BaseModel):
    remarks: Optional[str] = Field(default=None, description="Free-text remark")


class HistoryPageDTO(BaseModel):
    records: List[PredictionRecordDTO]
    page: int = Field(ge=1)
    page_size: int
    total_count: int
    total_pages: int
    material: Optional[str] = Field(default=None, description="Active material filter")
    prediction: Optional[str] = Field(
        default=None, description="Active outcome filter"
    )
