"""
Application Use Case - Submit Prediction

Runs one submission through the session state machine:

    idle -> validating -> rejected
                       -> requesting -> succeeded
                                     -> degraded  (simulated label)
                                     -> failed    (fail policy only)

Succeeded and degraded submissions both create a history record; rejected
and failed ones leave the history untouched.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Mapping, Optional

import structlog

from cvd_platform.application.session import PredictionSession
from cvd_platform.domain.entities.errors import (
    ScoringServiceError,
    ScoringServiceStatusError,
)
from cvd_platform.domain.entities.material import DEFAULT_MATERIAL_CODES, Material
from cvd_platform.domain.entities.notification import Severity
from cvd_platform.domain.entities.prediction import (
    CANONICAL_LABELS,
    KnownOutcome,
    Outcome,
    PredictionParams,
    PredictionRecord,
    parse_outcome,
)
from cvd_platform.domain.gateways.scoring_gateway import IScoringGateway
from cvd_platform.domain.ports.notifier import INotifier
from cvd_platform.domain.services.parameter_validator import (
    ValidationResult,
    validate_parameters,
)

logger = structlog.get_logger(__name__)

NETWORK_ERROR_MESSAGE = (
    "Failed to connect to the prediction server. "
    "Please check if the server is running."
)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    DEGRADED = "degraded"
    FAILED = "failed"


class TransportFailurePolicy(str, Enum):
    """What to do when the scoring service cannot produce a label."""

    FAIL = "fail"
    SIMULATE = "simulate"


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    state: SubmissionState
    record: Optional[PredictionRecord] = None
    failure: Optional[ValidationResult] = None
    error: Optional[str] = None
    persisted: bool = False

    @property
    def simulated(self) -> bool:
        return self.state == SubmissionState.DEGRADED


def simulate_outcome(rng: random.Random) -> Outcome:
    """Draw one of the canonical labels uniformly."""
    return KnownOutcome(rng.choice(CANONICAL_LABELS))


class SubmitPredictionUseCase:
    """Validates parameters, asks the scoring service and records the result."""

    def __init__(
        self,
        session: PredictionSession,
        scoring_gateway: IScoringGateway,
        notifier: INotifier,
        material_codes: Optional[Mapping[str, str]] = None,
        failure_policy: TransportFailurePolicy = TransportFailurePolicy.SIMULATE,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.session = session
        self.scoring_gateway = scoring_gateway
        self.notifier = notifier
        self.material_codes = dict(material_codes or DEFAULT_MATERIAL_CODES)
        self.failure_policy = TransportFailurePolicy(failure_policy)
        self._rng = rng or random.Random()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def resolve_material_code(self, material: Material) -> str:
        code = self.material_codes.get(material.value)
        if code is None:
            code = DEFAULT_MATERIAL_CODES[material.value]
            logger.warning(
                "prediction.material_code_missing",
                material=material.value,
                fallback=code,
            )
        return code

    async def execute(
        self, params: PredictionParams, material: Optional[Material] = None
    ) -> SubmissionResult:
        """
        Submit one set of parameters.

        Raises:
            PredictionInProgressError: If another submission is outstanding
        """
        with self.session.submission():
            if material is not None:
                self.session.select_material(material)
            material = self.session.selected_material
            log = logger.bind(material=material.value)
            log.info("prediction.state", state=SubmissionState.VALIDATING.value)

            validation = validate_parameters(params, self.notifier)
            if not validation:
                log.info(
                    "prediction.state",
                    state=SubmissionState.REJECTED.value,
                    field=validation.field,
                )
                return SubmissionResult(SubmissionState.REJECTED, failure=validation)

            self.session.current_outcome = None
            material_code = self.resolve_material_code(material)
            log.info(
                "prediction.state",
                state=SubmissionState.REQUESTING.value,
                material_code=material_code,
            )

            try:
                raw_label = await self.scoring_gateway.predict(
                    material_code, params.to_wire()
                )
                outcome = parse_outcome(raw_label)
                state = SubmissionState.SUCCEEDED
            except ScoringServiceError as exc:
                if self.failure_policy == TransportFailurePolicy.FAIL:
                    self._notify_failure(exc)
                    log.warning(
                        "prediction.state",
                        state=SubmissionState.FAILED.value,
                        error=exc.message,
                    )
                    return SubmissionResult(SubmissionState.FAILED, error=exc.message)
                outcome = simulate_outcome(self._rng)
                state = SubmissionState.DEGRADED
                log.warning(
                    "prediction.degraded",
                    error=exc.message,
                    simulated_label=outcome.value,
                )

            record = PredictionRecord(
                id=self.session.id_factory.next_id(),
                material=material,
                params=params,
                prediction=outcome,
                timestamp=self._clock(),
            )
            persisted = await self.session.store.append(record)
            self.session.current_outcome = outcome

            suffix = " (simulated)" if state == SubmissionState.DEGRADED else ""
            self.notifier.notify(
                "Prediction Complete", f"Result: {outcome.value}{suffix}"
            )
            log.info(
                "prediction.state",
                state=state.value,
                record_id=record.id,
                prediction=outcome.value,
                persisted=persisted,
            )
            return SubmissionResult(state, record=record, persisted=persisted)

    def _notify_failure(self, exc: ScoringServiceError) -> None:
        if isinstance(exc, ScoringServiceStatusError):
            self.notifier.notify("API Error", exc.message, Severity.DESTRUCTIVE)
        else:
            self.notifier.notify(
                "Network Error", NETWORK_ERROR_MESSAGE, Severity.DESTRUCTIVE
            )
