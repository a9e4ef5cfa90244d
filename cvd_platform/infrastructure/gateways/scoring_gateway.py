"""
Infrastructure Gateway - Scoring Service

HTTP client for the remote synthesis scoring service. One POST per
prediction, no retries; the caller decides what a failure means.
"""

import time
from typing import Any, Dict
from urllib.parse import quote

import httpx
import structlog

from cvd_platform.domain.entities.errors import (
    ScoringServiceError,
    ScoringServiceStatusError,
)
from cvd_platform.domain.gateways.scoring_gateway import IScoringGateway

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 5.0


class ScoringGateway(IScoringGateway):
    """Implementation of the scoring gateway using httpx."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the scoring gateway.

        Args:
            base_url: Prediction endpoint base (e.g. "http://127.0.0.1:5000/predict")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def predict(self, material_code: str, payload: Dict[str, Any]) -> str:
        url = f"{self.base_url}/{quote(material_code, safe='')}"

        logger.info(
            "scoring.request",
            url=url,
            material_code=material_code,
            payload=payload,
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, json=payload)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "scoring.http_error",
                status_code=e.response.status_code,
                response_text=e.response.text,
                url=url,
            )
            raise ScoringServiceStatusError(
                e.response.status_code,
                e.response.reason_phrase,
                {"url": url, "response_text": e.response.text},
            ) from e

        except httpx.RequestError as e:
            logger.error("scoring.request_error", error=str(e), url=url)
            raise ScoringServiceError(
                f"Failed to connect to the prediction server: {e}", {"url": url}
            ) from e

        except ValueError as e:
            logger.error("scoring.invalid_body", error=str(e), url=url)
            raise ScoringServiceError(
                f"Prediction server returned invalid JSON: {e}", {"url": url}
            ) from e

        label = data.get("prediction") if isinstance(data, dict) else None
        if not isinstance(label, str):
            logger.error("scoring.missing_label", body=data, url=url)
            raise ScoringServiceError(
                "Prediction server response did not contain a prediction label",
                {"url": url},
            )

        logger.info("scoring.response", url=url, prediction=label)
        return label

    async def ping(self) -> float:
        # Any HTTP answer, including 404 or 405, proves the service is reachable.
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                await client.get(self.base_url)
        except httpx.RequestError as e:
            raise ScoringServiceError(
                f"Prediction server unreachable: {e}", {"url": self.base_url}
            ) from e
        return (time.perf_counter() - started) * 1000
