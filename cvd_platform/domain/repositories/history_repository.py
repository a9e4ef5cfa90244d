"""
History Repository Interface

Persists the complete prediction history as one unit. There is no partial
update: every save replaces what was stored before.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from cvd_platform.domain.entities.prediction import PredictionRecord


class IHistoryRepository(ABC):
    """Interface for prediction history persistence."""

    @abstractmethod
    async def load(self) -> List[PredictionRecord]:
        """
        Load the stored history, newest first.

        Returns:
            The stored records; an empty list when nothing usable is stored.
            Never raises for missing or corrupt state.
        """
        pass

    @abstractmethod
    async def save(self, records: Sequence[PredictionRecord]) -> bool:
        """
        Replace the stored history with the given records.

        Returns:
            True when the write reached the durable slot, False when it was
            lost. Never raises for storage failures.
        """
        pass
