"""
History View - Application Layer

Derives the filtered, paginated slice of the history that a client displays.
project_history() is pure and recomputed from scratch each time; HistoryView
is the navigation control that owns filters and the page index.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from cvd_platform.application.services.history_store import HistoryStore
from cvd_platform.domain.entities.prediction import PredictionRecord
from cvd_platform.shared.consts import HISTORY_PAGE_SIZE

ALL = "all"

FilterValue = Union[str, Enum, None]


@dataclass(frozen=True, slots=True)
class HistoryPage:
    records: Tuple[PredictionRecord, ...]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    material: Optional[str] = None
    prediction: Optional[str] = None


def normalize_filter(value: FilterValue) -> Optional[str]:
    """None, '' and 'all' mean no filter; enums compare by their value."""
    if isinstance(value, Enum):
        value = value.value
    if value is None or value == "" or value == ALL:
        return None
    return str(value)


def filter_history(
    records: Sequence[PredictionRecord],
    material: FilterValue = None,
    prediction: FilterValue = None,
) -> List[PredictionRecord]:
    material_value = normalize_filter(material)
    prediction_value = normalize_filter(prediction)

    filtered = list(records)
    if material_value is not None:
        filtered = [r for r in filtered if r.material.value == material_value]
    if prediction_value is not None:
        filtered = [r for r in filtered if r.prediction.value == prediction_value]
    return filtered


def count_pages(total_count: int, page_size: int = HISTORY_PAGE_SIZE) -> int:
    return math.ceil(total_count / page_size)


def project_history(
    records: Sequence[PredictionRecord],
    material: FilterValue = None,
    prediction: FilterValue = None,
    page: int = 1,
    page_size: int = HISTORY_PAGE_SIZE,
) -> HistoryPage:
    """
    Filter by material, then by outcome label, and cut one 1-based page.

    Insertion order is preserved. A page past the end is empty; keeping the
    index in range is the job of HistoryView.

    Raises:
        ValueError: If page or page_size is smaller than 1
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    filtered = filter_history(records, material, prediction)
    start = (page - 1) * page_size
    return HistoryPage(
        records=tuple(filtered[start : start + page_size]),
        page=page,
        page_size=page_size,
        total_count=len(filtered),
        total_pages=count_pages(len(filtered), page_size),
        material=normalize_filter(material),
        prediction=normalize_filter(prediction),
    )


class HistoryView:
    """
    Filter and page state over a history store.

    The page index goes back to 1 whenever a filter or the underlying
    collection changes, and navigation is clamped to [1, max(1, total_pages)].
    """

    def __init__(self, store: HistoryStore, page_size: int = HISTORY_PAGE_SIZE):
        self._store = store
        self.page_size = page_size
        self._material: Optional[str] = None
        self._prediction: Optional[str] = None
        self._page = 1
        self._seen_revision = store.revision

    @property
    def material(self) -> Optional[str]:
        return self._material

    @property
    def prediction(self) -> Optional[str]:
        return self._prediction

    @property
    def page(self) -> int:
        self._sync()
        return self._page

    @property
    def total_pages(self) -> int:
        filtered = filter_history(
            self._store.records, self._material, self._prediction
        )
        return count_pages(len(filtered), self.page_size)

    def set_filters(
        self, material: FilterValue = None, prediction: FilterValue = None
    ) -> None:
        material_value = normalize_filter(material)
        prediction_value = normalize_filter(prediction)
        if (material_value, prediction_value) != (self._material, self._prediction):
            self._material = material_value
            self._prediction = prediction_value
            self._page = 1

    def go_to(self, page: int) -> int:
        self._sync()
        self._page = min(max(1, page), max(1, self.total_pages))
        return self._page

    def next_page(self) -> int:
        return self.go_to(self.page + 1)

    def previous_page(self) -> int:
        return self.go_to(self.page - 1)

    def current(self) -> HistoryPage:
        self._sync()
        return project_history(
            self._store.records,
            material=self._material,
            prediction=self._prediction,
            page=self._page,
            page_size=self.page_size,
        )

    def _sync(self) -> None:
        if self._store.revision != self._seen_revision:
            self._seen_revision = self._store.revision
            self._page = 1
