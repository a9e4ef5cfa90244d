"""Domain entities for synthesis predictions and their history."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from cvd_platform.domain.entities.material import Material

# Python attribute -> camelCase key used on the wire and in the durable slot.
PARAM_WIRE_NAMES: Dict[str, str] = {
    "substrate_type": "substrateType",
    "metal_chalcogen_ratio": "metalChalcogenRatio",
    "h_ar_ratio": "hArRatio",
    "pressure_type": "pressureType",
    "metal_temperature": "metalTemperature",
    "chalcogen_temperature": "chalcogenTemperature",
    "substrate_position": "substratePosition",
    "reaction_time": "reactionTime",
    "salt_addition": "saltAddition",
}


@dataclass(frozen=True, slots=True)
class PredictionParams:
    """
    Synthesis conditions submitted for one prediction.

    Defaults mirror an untouched form, so a candidate can be incomplete until
    it passes validation.
    """

    substrate_type: str = ""
    metal_chalcogen_ratio: Optional[float] = None
    h_ar_ratio: Optional[float] = None
    pressure_type: str = ""
    metal_temperature: Optional[int] = None
    chalcogen_temperature: Optional[int] = None
    substrate_position: str = ""
    reaction_time: Optional[int] = None
    salt_addition: str = ""

    def to_wire(self) -> Dict[str, Any]:
        return {PARAM_WIRE_NAMES[key]: value for key, value in asdict(self).items()}

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "PredictionParams":
        """Build params from a camelCase mapping; unknown keys are ignored."""
        values = {
            f.name: payload[PARAM_WIRE_NAMES[f.name]]
            for f in fields(cls)
            if PARAM_WIRE_NAMES[f.name] in payload
        }
        return cls(**values)


class OutcomeLabel(str, Enum):
    """Canonical synthesis-quality labels returned by the scoring service."""

    EXCELLENT = "excellent"
    QUALIFIED = "qualified"
    NO_YIELD = "no yield"


CANONICAL_LABELS: Tuple[OutcomeLabel, ...] = tuple(OutcomeLabel)


@dataclass(frozen=True, slots=True)
class KnownOutcome:
    label: OutcomeLabel

    @property
    def value(self) -> str:
        return self.label.value


@dataclass(frozen=True, slots=True)
class UnrecognizedOutcome:
    """A label the scoring service returned that is not one of ours."""

    raw: str

    @property
    def value(self) -> str:
        return self.raw


Outcome = Union[KnownOutcome, UnrecognizedOutcome]


def parse_outcome(raw: str) -> Outcome:
    try:
        return KnownOutcome(OutcomeLabel(raw))
    except ValueError:
        return UnrecognizedOutcome(raw)


_TONES: Dict[OutcomeLabel, str] = {
    OutcomeLabel.EXCELLENT: "success",
    OutcomeLabel.QUALIFIED: "warning",
    OutcomeLabel.NO_YIELD: "danger",
}


def outcome_tone(outcome: Outcome) -> str:
    """Styling bucket for an outcome; unrecognized labels render neutral."""
    if isinstance(outcome, KnownOutcome):
        return _TONES[outcome.label]
    return "neutral"


@dataclass(frozen=True, slots=True)
class PredictionRecord:
    """One entry of the prediction history. Only remarks may change."""

    id: str
    material: Material
    params: PredictionParams
    prediction: Outcome
    timestamp: datetime
    remarks: Optional[str] = None

    def with_remarks(self, remarks: Optional[str]) -> "PredictionRecord":
        return replace(self, remarks=remarks)
