"""
MongoDB durable slot.

Each key is one document ``{key, value, written_at, expires_at}``. The TTL
index removes expired documents eventually; reads also check the expiry so a
lagging TTL monitor never resurrects old history.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

import pymongo.errors
import structlog

from cvd_platform.domain.entities.errors import HistoryReadError, HistoryWriteError
from cvd_platform.infrastructure.database import MongoDatabase
from cvd_platform.infrastructure.slots.base import BoundedSlot, Clock

logger = structlog.get_logger(__name__)


class MongoKeyValueSlot(BoundedSlot):
    """Durable slot stored in a MongoDB collection."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        collection_name: str,
        retention: timedelta,
        max_bytes: int,
        clock: Optional[Clock] = None,
    ):
        super().__init__(retention, max_bytes, clock)
        self.db = mongo_database
        self.collection_name = collection_name

    async def load(self, key: str) -> Optional[bytes]:
        try:
            document = await self.db.find_one(self.collection_name, {"key": key})
        except pymongo.errors.PyMongoError as exc:
            raise HistoryReadError(f"Unable to read slot {key}: {exc}") from exc

        if document is None:
            return None
        written_at = document.get("written_at")
        if written_at is None or self._is_expired(written_at):
            logger.info("slot.mongo.expired", key=key)
            return None
        return bytes(document["value"])

    async def save(self, key: str, data: bytes) -> None:
        self._check_capacity(data)
        written_at = self._now()
        document = {
            "key": key,
            "value": data,
            "written_at": written_at,
            "expires_at": self._expires_at(written_at),
        }
        try:
            await self.db.upsert_one(self.collection_name, {"key": key}, document)
        except pymongo.errors.PyMongoError as exc:
            raise HistoryWriteError(f"Unable to write slot {key}: {exc}") from exc

    async def clear(self, key: str) -> None:
        await self.db.delete_one(self.collection_name, {"key": key})

    async def ping(self) -> None:
        try:
            await self.db.ping()
        except pymongo.errors.PyMongoError as exc:
            raise HistoryReadError(f"MongoDB is unreachable: {exc}") from exc
