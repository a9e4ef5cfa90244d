"""In-process durable slot, used for tests and throwaway sessions."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple

from cvd_platform.infrastructure.slots.base import BoundedSlot, Clock


class InMemoryKeyValueSlot(BoundedSlot):
    """Keeps entries in a dict; contents vanish with the process."""

    def __init__(
        self,
        retention: timedelta,
        max_bytes: int,
        clock: Optional[Clock] = None,
    ):
        super().__init__(retention, max_bytes, clock)
        self._entries: Dict[str, Tuple[bytes, datetime]] = {}

    async def load(self, key: str) -> Optional[bytes]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        data, written_at = entry
        if self._is_expired(written_at):
            del self._entries[key]
            return None
        return data

    async def save(self, key: str, data: bytes) -> None:
        self._check_capacity(data)
        self._entries[key] = (bytes(data), self._now())

    async def clear(self, key: str) -> None:
        self._entries.pop(key, None)

    async def ping(self) -> None:
        return None
