from __future__ import annotations

import random
from datetime import timedelta

import pytest

from cvd_platform.application.services import HistoryStore, HistoryView
from cvd_platform.application.session import PredictionSession
from cvd_platform.application.use_cases.history_use_cases import (
    DeleteRecordUseCase,
    GetHistoryPageUseCase,
    UpdateRemarksUseCase,
)
from cvd_platform.application.use_cases.prediction_use_case import (
    SubmissionState,
    SubmitPredictionUseCase,
)
from cvd_platform.domain.entities.material import Material
from cvd_platform.infrastructure.notifications import NotificationFeed
from cvd_platform.infrastructure.repositories import HistoryRepository
from cvd_platform.infrastructure.slots import FileKeyValueSlot


def _session(directory: str, clock) -> PredictionSession:
    slot = FileKeyValueSlot(
        directory, retention=timedelta(days=30), max_bytes=64 * 1024, clock=clock
    )
    store = HistoryStore(HistoryRepository(slot))
    return PredictionSession(store, HistoryView(store))


@pytest.mark.asyncio
async def test_history_survives_restart_until_retention_ends(
    tmp_path, frozen_clock, stub_gateway, valid_params
) -> None:
    directory = str(tmp_path / "history")
    feed = NotificationFeed()

    session = _session(directory, frozen_clock)
    await session.start()
    submit = SubmitPredictionUseCase(
        session, stub_gateway, feed, rng=random.Random(1), clock=frozen_clock
    )
    for material in (Material.MOS2, Material.WSE2, Material.MOS2):
        result = await submit.execute(valid_params, material)
        assert result.state is SubmissionState.SUCCEEDED

    newest = session.store.records[0]
    await UpdateRemarksUseCase(session).execute(newest.id, "bilayer edges")
    await DeleteRecordUseCase(session, feed).execute(session.store.records[1].id)

    restarted = _session(directory, frozen_clock)
    await restarted.start()

    page = await GetHistoryPageUseCase(restarted).execute(material="mos2")
    assert page.total_count == 2
    assert page.records[0].id == newest.id
    assert page.records[0].remarks == "bilayer edges"
    assert [n.title for n in feed.drain()].count("Prediction Complete") == 3

    later = await SubmitPredictionUseCase(
        restarted, stub_gateway, feed, clock=frozen_clock
    ).execute(valid_params)
    assert int(later.record.id) > int(newest.id)

    frozen_clock.advance(timedelta(days=30))
    expired = _session(directory, frozen_clock)
    await expired.start()
    assert len(expired.store) == 0
