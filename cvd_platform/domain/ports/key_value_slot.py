"""
Durable Slot Port

A single named storage entry holding opaque bytes. Entries expire a fixed
retention window after their last write and have a finite capacity, so
callers must treat a missing entry as the normal case.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueSlot(ABC):
    """Interface for durable key-value slot implementations."""

    @abstractmethod
    async def load(self, key: str) -> Optional[bytes]:
        """
        Read the entry stored under a key.

        Args:
            key: Name of the slot entry

        Returns:
            The stored bytes, or None when absent or expired

        Raises:
            HistoryReadError: When the backend cannot be read
        """
        pass

    @abstractmethod
    async def save(self, key: str, data: bytes) -> None:
        """
        Replace the entry stored under a key and restart its retention window.

        Args:
            key: Name of the slot entry
            data: Full payload to store

        Raises:
            SlotCapacityError: When the payload exceeds the slot capacity
            HistoryWriteError: When the backend cannot be written
        """
        pass

    @abstractmethod
    async def clear(self, key: str) -> None:
        """Remove the entry stored under a key, if any."""
        pass

    @abstractmethod
    async def ping(self) -> None:
        """
        Check that the backend is reachable without reading or expiring entries.

        Raises:
            HistoryReadError: When the backend is unavailable
        """
        pass
