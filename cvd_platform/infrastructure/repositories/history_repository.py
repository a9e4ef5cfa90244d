"""
History Repository - Infrastructure Layer

Serializes the whole prediction history into one durable slot entry as a
JSON array, and reads it back. Read and write failures are logged and
absorbed: losing history must never take the session down.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Sequence

import structlog

from cvd_platform.domain.entities.errors import HistoryReadError, HistoryWriteError
from cvd_platform.domain.entities.material import Material
from cvd_platform.domain.entities.prediction import (
    PredictionParams,
    PredictionRecord,
    parse_outcome,
)
from cvd_platform.domain.ports.key_value_slot import IKeyValueSlot
from cvd_platform.domain.repositories.history_repository import IHistoryRepository
from cvd_platform.shared.consts import HISTORY_SLOT_KEY

logger = structlog.get_logger(__name__)


class MalformedHistoryError(ValueError):
    """Raised when stored history does not have the expected structure."""

    pass


class HistoryRepository(IHistoryRepository):
    """Reads and rewrites the prediction history in a durable slot."""

    def __init__(self, slot: IKeyValueSlot, key: str = HISTORY_SLOT_KEY):
        """
        Args:
            slot: Durable slot backend
            key: Name of the slot entry holding the history
        """
        self.slot = slot
        self.key = key

    def _to_document(self, record: PredictionRecord) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "id": record.id,
            "material": record.material.value,
            "params": record.params.to_wire(),
            "prediction": record.prediction.value,
            "timestamp": record.timestamp.isoformat(),
        }
        if record.remarks is not None:
            document["remarks"] = record.remarks
        return document

    def _to_entity(self, document: Any) -> PredictionRecord:
        if not isinstance(document, dict):
            raise MalformedHistoryError("History entry is not an object")
        params = document.get("params")
        prediction = document.get("prediction")
        remarks = document.get("remarks")
        if not isinstance(params, dict) or not isinstance(prediction, str):
            raise MalformedHistoryError("History entry has malformed fields")
        if remarks is not None and not isinstance(remarks, str):
            raise MalformedHistoryError("History entry has malformed remarks")

        try:
            return PredictionRecord(
                id=str(document["id"]),
                material=Material(document["material"]),
                params=PredictionParams.from_wire(params),
                prediction=parse_outcome(prediction),
                timestamp=datetime.fromisoformat(
                    str(document["timestamp"]).replace("Z", "+00:00")
                ),
                remarks=remarks,
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedHistoryError(f"History entry is invalid: {exc}") from exc

    def encode(self, records: Sequence[PredictionRecord]) -> bytes:
        payload = [self._to_document(record) for record in records]
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")

    def decode(self, data: bytes) -> List[PredictionRecord]:
        """
        Parse a stored payload.

        Raises:
            MalformedHistoryError: When the payload is not a JSON array of
                well-formed records or repeats an identifier
        """
        try:
            payload = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise MalformedHistoryError(f"History is not valid JSON: {exc}") from exc

        if not isinstance(payload, list):
            raise MalformedHistoryError("History is not a JSON array")

        records = [self._to_entity(document) for document in payload]
        if len({record.id for record in records}) != len(records):
            raise MalformedHistoryError("History contains duplicate identifiers")
        return records

    async def load(self) -> List[PredictionRecord]:
        """Return the stored history, or an empty list when absent or unusable."""
        try:
            data = await self.slot.load(self.key)
        except HistoryReadError as exc:
            logger.error("history.load_failed", key=self.key, error=exc.message)
            return []

        if data is None:
            logger.info("history.load_empty", key=self.key)
            return []

        try:
            records = self.decode(data)
        except MalformedHistoryError as exc:
            logger.error("history.load_failed", key=self.key, error=str(exc))
            return []

        logger.info("history.loaded", key=self.key, count=len(records))
        return records

    async def save(self, records: Sequence[PredictionRecord]) -> bool:
        """Rewrite the whole history; returns False when the write was lost."""
        try:
            await self.slot.save(self.key, self.encode(records))
        except HistoryWriteError as exc:
            logger.error(
                "history.save_failed",
                key=self.key,
                count=len(records),
                error=exc.message,
            )
            return False

        logger.debug("history.saved", key=self.key, count=len(records))
        return True
