"""Stateful application services backing the prediction session."""

from .history_store import HistoryStore
from .history_view import (
    ALL,
    HistoryPage,
    HistoryView,
    count_pages,
    filter_history,
    normalize_filter,
    project_history,
)

__all__ = [
    "ALL",
    "HistoryPage",
    "HistoryStore",
    "HistoryView",
    "count_pages",
    "filter_history",
    "normalize_filter",
    "project_history",
]
