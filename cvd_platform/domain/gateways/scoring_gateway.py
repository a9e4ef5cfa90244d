"""
Domain Gateway - Scoring Service

Interface for the remote service that turns synthesis parameters into an
outcome label.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class IScoringGateway(ABC):
    """Interface for the remote scoring service."""

    @abstractmethod
    async def predict(self, material_code: str, payload: Dict[str, Any]) -> str:
        """
        Request an outcome label for one set of synthesis parameters.

        Args:
            material_code: Remote model identifier (e.g. "MoS2")
            payload: camelCase synthesis parameters sent as the JSON body

        Returns:
            The label returned by the service, unvalidated

        Raises:
            ScoringServiceStatusError: When the service answers with a
                non-success status
            ScoringServiceError: When the service is unreachable or the body
                carries no label
        """
        pass

    @abstractmethod
    async def ping(self) -> float:
        """
        Check that the service accepts connections.

        Returns:
            Round-trip latency in milliseconds

        Raises:
            ScoringServiceError: When the service cannot be reached
        """
        pass
