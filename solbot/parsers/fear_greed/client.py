"""alternative.me Crypto Fear & Greed Index client. No key required."""

import httpx
from loguru import logger
from pydantic import ValidationError

from solbot.models import SentimentReading
from solbot.parsers.fear_greed.models import FearGreedResponse

BASE_URL = "https://api.alternative.me"


class FearGreedApiError(Exception):
    pass


class FearGreedClient:
    def __init__(self, timeout: float = 15.0) -> None:
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def _request(self, path: str, **kwargs: object) -> dict:
        try:
            resp = await self._client.get(path, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise FearGreedApiError(f"HTTP {e.response.status_code}: {path}") from e
        except httpx.RequestError as e:
            raise FearGreedApiError(f"Request failed: {path}: {e}") from e
        except ValueError as e:
            raise FearGreedApiError(f"Invalid JSON: {path}") from e

    async def get_fear_greed(self) -> SentimentReading | None:
        """Latest Fear & Greed reading, or None."""
        try:
            data = await self._request("/fng/", params={"limit": 1})
            response = FearGreedResponse.model_validate(data)
        except (FearGreedApiError, ValidationError) as e:
            logger.warning(f"[FNG] Fear & Greed fetch failed: {e}")
            return None

        if not response.data:
            logger.warning("[FNG] Empty Fear & Greed response")
            return None

        entry = response.data[0]
        return SentimentReading(
            score=entry.value,
            classification=entry.value_classification,
            timestamp=entry.timestamp,
        )

    async def close(self) -> None:
        await self._client.aclose()
