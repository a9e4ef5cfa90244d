"""
Prediction Session - Application Layer

The explicit context object for one user's work: history, view state,
selected material, last outcome and the busy flag. The composition root
owns exactly one instance and hands it to the use cases.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import structlog

from cvd_platform.application.services.history_store import HistoryStore
from cvd_platform.application.services.history_view import HistoryView
from cvd_platform.domain.entities.errors import PredictionInProgressError
from cvd_platform.domain.entities.material import DEFAULT_MATERIAL, Material
from cvd_platform.domain.entities.prediction import Outcome
from cvd_platform.domain.services.record_ids import MonotonicIdFactory

logger = structlog.get_logger(__name__)


class PredictionSession:
    """State shared by the prediction and history use cases."""

    def __init__(
        self,
        store: HistoryStore,
        view: HistoryView,
        id_factory: Optional[MonotonicIdFactory] = None,
        selected_material: Material = DEFAULT_MATERIAL,
    ):
        self.store = store
        self.view = view
        self.id_factory = id_factory or MonotonicIdFactory()
        self.selected_material = selected_material
        self.current_outcome: Optional[Outcome] = None
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    async def start(self) -> None:
        """Load persisted history; called once when the session begins."""
        await self.store.load()
        self.id_factory.observe(record.id for record in self.store.records)
        logger.info(
            "session.started",
            history_count=len(self.store),
            material=self.selected_material.value,
        )

    def select_material(self, material: Material) -> None:
        """Switch material; the outcome shown for the previous one is cleared."""
        if material != self.selected_material:
            self.selected_material = material
            self.current_outcome = None
            logger.debug("session.material_selected", material=material.value)

    @contextmanager
    def submission(self) -> Iterator[None]:
        """Hold the busy flag for the duration of one prediction request."""
        if self._busy:
            raise PredictionInProgressError()
        self._busy = True
        try:
            yield
        finally:
            self._busy = False
