"""
History Use Cases - Application Layer

Reading one page of the prediction history and the two mutations a user may
perform on it: editing a remark and deleting a record.
"""

from typing import Optional

import structlog

from cvd_platform.application.dtos.prediction_dto import (
    HistoryPageDTO,
    PredictionRecordDTO,
)
from cvd_platform.application.services.history_view import FilterValue, HistoryPage
from cvd_platform.application.session import PredictionSession
from cvd_platform.domain.ports.notifier import INotifier

logger = structlog.get_logger(__name__)


def _to_page_dto(page: HistoryPage) -> HistoryPageDTO:
    return HistoryPageDTO(
        records=[PredictionRecordDTO.from_domain(r) for r in page.records],
        page=page.page,
        page_size=page.page_size,
        total_count=page.total_count,
        total_pages=page.total_pages,
        material=page.material,
        prediction=page.prediction,
    )


class GetHistoryPageUseCase:
    """Use case for reading a filtered page of the history."""

    def __init__(self, session: PredictionSession):
        self.session = session

    async def execute(
        self,
        material: FilterValue = None,
        prediction: FilterValue = None,
        page: Optional[int] = None,
    ) -> HistoryPageDTO:
        """
        Apply filters and move to a page.

        Changing a filter returns to page 1. A requested page is clamped to
        the available range; None keeps the current page.
        """
        view = self.session.view
        view.set_filters(material, prediction)
        if page is not None:
            view.go_to(page)
        return _to_page_dto(view.current())


class UpdateRemarksUseCase:
    """Use case for editing the remark of one record."""

    def __init__(self, session: PredictionSession):
        self.session = session

    async def execute(
        self, record_id: str, remarks: Optional[str]
    ) -> Optional[PredictionRecordDTO]:
        """Returns the updated record, or None when the id is unknown."""
        updated = await self.session.store.set_remark(record_id, remarks)
        if updated is None:
            return None
        return PredictionRecordDTO.from_domain(updated)


class DeleteRecordUseCase:
    """Use case for removing one record from the history."""

    def __init__(self, session: PredictionSession, notifier: INotifier):
        self.session = session
        self.notifier = notifier

    async def execute(self, record_id: str) -> bool:
        deleted = await self.session.store.delete(record_id)
        if deleted:
            self.notifier.notify(
                "Record Deleted", "Prediction record has been removed from history."
            )
        return deleted
