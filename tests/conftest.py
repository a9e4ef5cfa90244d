from __future__ import annotations

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cvd_platform.domain.entities.errors import ScoringServiceError  # noqa: E402
from cvd_platform.domain.entities.material import Material  # noqa: E402
from cvd_platform.domain.entities.notification import Severity  # noqa: E402
from cvd_platform.domain.entities.prediction import (  # noqa: E402
    Outcome,
    PredictionParams,
    PredictionRecord,
    parse_outcome,
)
from cvd_platform.infrastructure.slots import InMemoryKeyValueSlot  # noqa: E402

EPOCH = datetime(2024, 9, 9, 12, 0, tzinfo=timezone.utc)


class FrozenClock:
    """Manually advanced clock for retention tests."""

    def __init__(self, now: datetime = EPOCH):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class RecordingNotifier:
    def __init__(self) -> None:
        self.notifications: List[Tuple[str, str, Severity]] = []

    def notify(
        self, title: str, message: str, severity: Severity = Severity.NORMAL
    ) -> None:
        self.notifications.append((title, message, severity))

    @property
    def titles(self) -> List[str]:
        return [title for title, _, _ in self.notifications]


class StubScoringGateway:
    """Scoring gateway returning a fixed label, or raising a fixed error."""

    def __init__(
        self,
        label: str = "excellent",
        error: Optional[ScoringServiceError] = None,
    ) -> None:
        self.label = label
        self.error = error
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def predict(self, material_code: str, payload: Dict[str, Any]) -> str:
        self.calls.append((material_code, payload))
        if self.error is not None:
            raise self.error
        return self.label

    async def ping(self) -> float:
        if self.error is not None:
            raise self.error
        return 1.5


class FakeCollection:
    def __init__(self) -> None:
        self.documents: Dict[str, Dict[str, Any]] = {}
        self.created_indexes: List[Tuple[Any, ...]] = []
        self.acknowledge = True

    def find_one(self, query: Dict[str, Any]) -> Dict[str, Any] | None:
        return self.documents.get(query.get("key"))

    def replace_one(
        self, query: Dict[str, Any], document: Dict[str, Any], upsert: bool = False
    ) -> Any:
        key = query.get("key")
        matched = key in self.documents
        if matched or upsert:
            self.documents[key] = dict(document)
        return SimpleNamespace(
            matched_count=int(matched), acknowledged=self.acknowledge
        )

    def delete_one(self, query: Dict[str, Any]) -> Any:
        removed = self.documents.pop(query.get("key"), None)
        return SimpleNamespace(
            deleted_count=0 if removed is None else 1, acknowledged=True
        )

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys


class FakeMongoDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.closed = False
        self.pings = 0

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_one(self, collection_name: str, query: Dict[str, Any]) -> Any:
        return self.get_collection(collection_name).find_one(query)

    async def upsert_one(
        self, collection_name: str, query: Dict[str, Any], document: Dict[str, Any]
    ) -> Any:
        self.get_collection(collection_name).replace_one(query, document, upsert=True)
        return document

    async def delete_one(self, collection_name: str, query: Dict[str, Any]) -> int:
        return self.get_collection(collection_name).delete_one(query).deleted_count

    async def ping(self) -> None:
        self.pings += 1

    async def create_indexes(self, collection_name: str) -> None:
        self.get_collection(collection_name).create_index("key", name="slot_key_idx")

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def valid_params() -> PredictionParams:
    return PredictionParams(
        substrate_type="Sapphire",
        metal_chalcogen_ratio=0.5,
        h_ar_ratio=0.1,
        pressure_type="atmospheric pressure",
        metal_temperature=850,
        chalcogen_temperature=200,
        substrate_position="top",
        reaction_time=15,
        salt_addition="yes",
    )


@pytest.fixture()
def make_record(valid_params: PredictionParams) -> Callable[..., PredictionRecord]:
    def _make(
        record_id: str,
        material: Material = Material.MOS2,
        prediction: str | Outcome = "excellent",
        remarks: Optional[str] = None,
    ) -> PredictionRecord:
        outcome = (
            parse_outcome(prediction) if isinstance(prediction, str) else prediction
        )
        return PredictionRecord(
            id=record_id,
            material=material,
            params=valid_params,
            prediction=outcome,
            timestamp=EPOCH,
            remarks=remarks,
        )

    return _make


@pytest.fixture()
def frozen_clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture()
def memory_slot(frozen_clock: FrozenClock) -> InMemoryKeyValueSlot:
    return InMemoryKeyValueSlot(
        retention=timedelta(days=30), max_bytes=64 * 1024, clock=frozen_clock
    )


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()


@pytest.fixture()
def stub_gateway() -> StubScoringGateway:
    return StubScoringGateway()
