from __future__ import annotations

from typing import List

import pytest

from cvd_platform.application.services import (
    HistoryStore,
    HistoryView,
    filter_history,
    project_history,
)
from cvd_platform.domain.entities.material import Material
from cvd_platform.domain.entities.prediction import OutcomeLabel, PredictionRecord
from cvd_platform.infrastructure.repositories import HistoryRepository

_MATERIALS = [Material.MOS2, Material.WSE2, Material.WS2]
_LABELS = ["excellent", "qualified", "no yield", "unheard of"]


@pytest.fixture()
def history(make_record) -> List[PredictionRecord]:
    return [
        make_record(
            str(100 - i),
            _MATERIALS[i % len(_MATERIALS)],
            _LABELS[i % len(_LABELS)],
        )
        for i in range(25)
    ]


def test_pages_of_ten(history) -> None:
    first = project_history(history, page=1)
    last = project_history(history, page=3)

    assert first.total_pages == 3
    assert first.total_count == 25
    assert [r.id for r in first.records] == [r.id for r in history[:10]]
    assert [r.id for r in last.records] == [r.id for r in history[20:]]
    assert len(last.records) == 5


def test_page_past_the_end_is_empty(history) -> None:
    assert project_history(history, page=4).records == ()


def test_page_below_one_rejected(history) -> None:
    with pytest.raises(ValueError):
        project_history(history, page=0)


def test_empty_history_has_zero_pages() -> None:
    page = project_history([], page=1)

    assert page.total_pages == 0
    assert page.records == ()


def test_filters_commute_and_preserve_order(history) -> None:
    material_first = filter_history(
        filter_history(history, material="mos2"), prediction="excellent"
    )
    prediction_first = filter_history(
        filter_history(history, prediction="excellent"), material="mos2"
    )
    combined = filter_history(history, material="mos2", prediction="excellent")

    assert material_first == prediction_first == combined
    assert combined
    assert all(r.material is Material.MOS2 for r in combined)
    assert [history.index(r) for r in combined] == sorted(
        history.index(r) for r in combined
    )


def test_all_means_no_filter(history) -> None:
    assert filter_history(history, material="all", prediction="") == history


def test_enum_filters_match_values(history) -> None:
    by_enum = filter_history(history, Material.WSE2, OutcomeLabel.NO_YIELD)
    by_text = filter_history(history, "wse2", "no yield")

    assert by_enum == by_text


def test_unrecognized_labels_are_filterable(history) -> None:
    assert filter_history(history, prediction="unheard of")


@pytest.fixture()
def view(memory_slot) -> HistoryView:
    return HistoryView(HistoryStore(HistoryRepository(memory_slot)), page_size=10)


@pytest.mark.asyncio
async def test_navigation_is_clamped(view, make_record) -> None:
    for i in range(25):
        await view._store.append(make_record(str(i)))

    assert view.go_to(0) == 1
    assert view.previous_page() == 1
    assert view.go_to(99) == 3
    assert view.next_page() == 3
    assert len(view.current().records) == 5


def test_navigation_on_empty_history_stays_on_page_one(view) -> None:
    assert view.go_to(5) == 1
    assert view.current().records == ()


@pytest.mark.asyncio
async def test_filter_change_resets_page(view, make_record) -> None:
    for i in range(25):
        await view._store.append(make_record(str(i)))
    view.go_to(2)

    view.set_filters(material="all")
    assert view.page == 2

    view.set_filters(material="mos2")
    assert view.page == 1


@pytest.mark.asyncio
async def test_collection_change_resets_page(view, make_record) -> None:
    for i in range(25):
        await view._store.append(make_record(str(i)))
    view.go_to(3)

    await view._store.delete("0")

    assert view.page == 1
