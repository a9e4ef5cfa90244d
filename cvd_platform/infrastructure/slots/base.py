"""Shared retention and capacity rules for durable slot implementations."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from cvd_platform.domain.entities.errors import SlotCapacityError
from cvd_platform.domain.ports.key_value_slot import IKeyValueSlot

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BoundedSlot(IKeyValueSlot):
    """Base class adding a retention window and a byte capacity."""

    def __init__(
        self,
        retention: timedelta,
        max_bytes: int,
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            retention: How long an entry survives after its last write
            max_bytes: Largest payload accepted by save()
            clock: Source of the current time (aware UTC)
        """
        self.retention = retention
        self.max_bytes = max_bytes
        self._clock = clock or utc_now

    def _now(self) -> datetime:
        return self._clock()

    def _expires_at(self, written_at: datetime) -> datetime:
        return written_at + self.retention

    def _is_expired(self, written_at: datetime) -> bool:
        if written_at.tzinfo is None:
            written_at = written_at.replace(tzinfo=timezone.utc)
        return self._expires_at(written_at) <= self._now()

    def _check_capacity(self, data: bytes) -> None:
        if len(data) > self.max_bytes:
            raise SlotCapacityError(len(data), self.max_bytes)
