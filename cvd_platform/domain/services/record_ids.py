"""Time-derived record identifiers."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Optional


class MonotonicIdFactory:
    """
    Issues millisecond-timestamp identifiers that never repeat.

    An identifier that would not be strictly greater than the previous one
    (same millisecond, clock step back, or a newer id already in history) is
    bumped to previous + 1.
    """

    def __init__(self, clock_ms: Optional[Callable[[], int]] = None):
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._last = 0

    def observe(self, existing_ids: Iterable[str]) -> None:
        """Make sure future ids sort after every numeric id already issued."""
        for record_id in existing_ids:
            if record_id.isdigit():
                self._last = max(self._last, int(record_id))

    def next_id(self) -> str:
        candidate = self._clock_ms()
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)
