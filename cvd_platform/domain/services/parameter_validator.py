"""Domain service for checking synthesis parameters before submission."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple, Type

from cvd_platform.domain.entities.errors import ParameterValidationError
from cvd_platform.domain.entities.material import (
    PressureType,
    SaltAddition,
    SubstratePosition,
    SubstrateType,
)
from cvd_platform.domain.entities.notification import Severity
from cvd_platform.domain.entities.prediction import PARAM_WIRE_NAMES, PredictionParams
from cvd_platform.domain.ports.notifier import INotifier

VALIDATION_TITLE = "Validation Error"

REQUIRED_FIELDS: Tuple[Tuple[str, Type[Enum]], ...] = (
    ("substrate_type", SubstrateType),
    ("pressure_type", PressureType),
    ("substrate_position", SubstratePosition),
    ("salt_addition", SaltAddition),
)

NUMERIC_FIELDS: Tuple[str, ...] = (
    "metal_chalcogen_ratio",
    "h_ar_ratio",
    "metal_temperature",
    "chalcogen_temperature",
    "reaction_time",
)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation pass; truthy when the candidate is acceptable."""

    ok: bool
    field: Optional[str] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_failure(self) -> None:
        if not self.ok:
            raise ParameterValidationError(self.field or "", self.message or "")


def humanize_field(field: str) -> str:
    """'substrate_type' or 'substrateType' -> 'substrate type'."""
    wire_name = PARAM_WIRE_NAMES.get(field, field)
    return re.sub(r"([A-Z])", r" \1", wire_name).lower()


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def _check(params: PredictionParams) -> ValidationResult:
    for field, choices in REQUIRED_FIELDS:
        value = getattr(params, field)
        if not value:
            return ValidationResult(
                ok=False, field=field, message=f"Please select {humanize_field(field)}"
            )
        if value not in {choice.value for choice in choices}:
            return ValidationResult(
                ok=False,
                field=field,
                message=f"Please select a valid {humanize_field(field)}",
            )

    for field in NUMERIC_FIELDS:
        if not _is_positive_number(getattr(params, field)):
            return ValidationResult(
                ok=False,
                field=field,
                message=f"Please enter a valid {humanize_field(field)}",
            )

    return ValidationResult(ok=True)


def validate_parameters(
    params: PredictionParams, notifier: Optional[INotifier] = None
) -> ValidationResult:
    """
    Check a candidate and report the first offending field.

    Required selections are checked first, then numeric fields, each in
    declaration order. A failure is also pushed to the notifier when one is
    given. Never raises.
    """
    result = _check(params)
    if not result and notifier is not None:
        notifier.notify(VALIDATION_TITLE, result.message or "", Severity.DESTRUCTIVE)
    return result
