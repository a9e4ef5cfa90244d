"""Pure domain services."""

from .parameter_validator import (
    ValidationResult,
    humanize_field,
    validate_parameters,
)
from .record_ids import MonotonicIdFactory

__all__ = [
    "MonotonicIdFactory",
    "ValidationResult",
    "humanize_field",
    "validate_parameters",
]
