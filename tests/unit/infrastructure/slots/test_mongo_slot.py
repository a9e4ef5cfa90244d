from __future__ import annotations

from datetime import timedelta
from typing import cast

import pymongo.errors
import pytest

from cvd_platform.domain.entities.errors import (
    HistoryReadError,
    HistoryWriteError,
    SlotCapacityError,
)
from cvd_platform.infrastructure.database import MongoDatabase
from cvd_platform.infrastructure.slots import MongoKeyValueSlot


def _slot(database, clock, max_bytes: int = 1024) -> MongoKeyValueSlot:
    return MongoKeyValueSlot(
        mongo_database=cast(MongoDatabase, database),
        collection_name="history_slots",
        retention=timedelta(days=30),
        max_bytes=max_bytes,
        clock=clock,
    )


@pytest.mark.asyncio
async def test_save_writes_expiry_document(fake_mongo_database, frozen_clock) -> None:
    slot = _slot(fake_mongo_database, frozen_clock)

    await slot.save("cvd_history", b"[]")

    document = fake_mongo_database.get_collection("history_slots").documents[
        "cvd_history"
    ]
    assert document["value"] == b"[]"
    assert document["written_at"] == frozen_clock.now
    assert document["expires_at"] == frozen_clock.now + timedelta(days=30)
    assert await slot.load("cvd_history") == b"[]"


@pytest.mark.asyncio
async def test_expired_document_is_ignored(fake_mongo_database, frozen_clock) -> None:
    slot = _slot(fake_mongo_database, frozen_clock)
    await slot.save("cvd_history", b"[]")

    frozen_clock.advance(timedelta(days=31))

    assert await slot.load("cvd_history") is None


@pytest.mark.asyncio
async def test_capacity_is_enforced(fake_mongo_database, frozen_clock) -> None:
    slot = _slot(fake_mongo_database, frozen_clock, max_bytes=2)

    with pytest.raises(SlotCapacityError):
        await slot.save("cvd_history", b"[1]")


class _FailingDatabase:
    async def ping(self):
        raise pymongo.errors.ServerSelectionTimeoutError("no servers")

    async def find_one(self, *args, **kwargs):
        raise pymongo.errors.ServerSelectionTimeoutError("no servers")

    async def upsert_one(self, *args, **kwargs):
        raise pymongo.errors.OperationFailure("not acknowledged")


@pytest.mark.asyncio
async def test_driver_errors_are_translated(frozen_clock) -> None:
    slot = _slot(_FailingDatabase(), frozen_clock)

    with pytest.raises(HistoryReadError):
        await slot.load("cvd_history")
    with pytest.raises(HistoryWriteError):
        await slot.save("cvd_history", b"[]")
    with pytest.raises(HistoryReadError):
        await slot.ping()


@pytest.mark.asyncio
async def test_clear_deletes_document(fake_mongo_database, frozen_clock) -> None:
    slot = _slot(fake_mongo_database, frozen_clock)
    await slot.save("cvd_history", b"[]")

    await slot.clear("cvd_history")

    assert await slot.load("cvd_history") is None


@pytest.mark.asyncio
async def test_ping_reaches_database(fake_mongo_database, frozen_clock) -> None:
    await _slot(fake_mongo_database, frozen_clock).ping()

    assert fake_mongo_database.pings == 1
