"""
History Store - Application Layer

In-memory source of truth for the prediction history during a session.
Records are kept newest first, and every mutation rewrites the complete
collection through the history repository.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import structlog

from cvd_platform.domain.entities.prediction import PredictionRecord
from cvd_platform.domain.repositories.history_repository import IHistoryRepository

logger = structlog.get_logger(__name__)


class HistoryStore:
    """Prediction history with whole-collection durable writes."""

    def __init__(self, repository: IHistoryRepository):
        self._repository = repository
        self._records: List[PredictionRecord] = []
        self._revision = 0

    @property
    def records(self) -> Tuple[PredictionRecord, ...]:
        return tuple(self._records)

    @property
    def revision(self) -> int:
        """Counter bumped on every change of the collection."""
        return self._revision

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> Optional[PredictionRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    async def load(self) -> int:
        """Replace the in-memory collection with the persisted one."""
        self._records = list(await self._repository.load())
        self._touch()
        logger.info("history_store.loaded", count=len(self._records))
        return len(self._records)

    async def append(self, record: PredictionRecord) -> bool:
        """
        Insert a record at the front and persist the collection.

        Returns:
            Whether the durable write succeeded

        Raises:
            ValueError: If a record with the same identifier already exists
        """
        if self.get(record.id) is not None:
            raise ValueError(f"Duplicate prediction record id {record.id}")
        self._records.insert(0, record)
        self._touch()
        logger.info("history_store.appended", record_id=record.id)
        return await self._persist()

    async def set_remark(
        self, record_id: str, remarks: Optional[str]
    ) -> Optional[PredictionRecord]:
        """Replace a record's remarks; unknown identifiers are ignored."""
        for index, record in enumerate(self._records):
            if record.id == record_id:
                updated = record.with_remarks(remarks)
                self._records[index] = updated
                self._touch()
                logger.info("history_store.remarks_updated", record_id=record_id)
                await self._persist()
                return updated
        logger.debug("history_store.remarks_unknown_record", record_id=record_id)
        return None

    async def delete(self, record_id: str) -> bool:
        """Remove a record; unknown identifiers are ignored."""
        remaining = [record for record in self._records if record.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug("history_store.delete_unknown_record", record_id=record_id)
            return False
        self._records = remaining
        self._touch()
        logger.info("history_store.deleted", record_id=record_id)
        await self._persist()
        return True

    def _touch(self) -> None:
        self._revision += 1

    async def _persist(self) -> bool:
        return await self._repository.save(self._records)
