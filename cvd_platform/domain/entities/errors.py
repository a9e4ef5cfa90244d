"""
Domain Errors

Exception hierarchy shared by every layer. None of these is fatal to the
process: validation failures block a submission, transport failures are
absorbed by the failure policy and persistence failures cost history.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ParameterValidationError(DomainError):
    """Raised when synthesis parameters are missing or malformed."""

    def __init__(
        self, field: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.field = field
        super().__init__(message, {"field": field, **(details or {})})


class ScoringServiceError(DomainError):
    """Raised when the remote scoring service cannot produce a label."""

    pass


class ScoringServiceStatusError(ScoringServiceError):
    """Raised when the scoring service answers with a non-success status."""

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.reason = reason
        message = f"Server returned {status_code}: {reason}".rstrip(": ")
        super().__init__(message, {"status_code": status_code, **(details or {})})


class HistoryReadError(DomainError):
    """Raised when the durable slot cannot be read."""

    pass


class HistoryWriteError(DomainError):
    """Raised when the durable slot cannot be written."""

    pass


class SlotCapacityError(HistoryWriteError):
    """Raised when a payload does not fit into the durable slot."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(
            f"Payload of {size} bytes exceeds slot capacity of {capacity} bytes",
            {"size": size, "capacity": capacity},
        )


class PredictionInProgressError(DomainError):
    """Raised when a submission arrives while another one is outstanding."""

    def __init__(self) -> None:
        super().__init__("A prediction request is already in progress")
