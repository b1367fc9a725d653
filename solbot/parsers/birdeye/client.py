"""Birdeye Data Services API client: trending Solana tokens."""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from solbot.models import TokenSummary
from solbot.parsers.birdeye.models import BirdeyeTrendingList

BASE_URL = "https://public-api.birdeye.so"
MAX_TRENDING = 3


class BirdeyeApiError(Exception):
    pass


class BirdeyeClient:
    """Async client for Birdeye Data Services API."""

    def __init__(self, api_key: str, timeout: float = 15.0) -> None:
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            timeout=timeout,
            headers={
                "X-API-KEY": api_key,
                "Accept": "application/json",
                "x-chain": "solana",
            },
        )

    async def _request(self, path: str, **kwargs: Any) -> Any:
        """Single GET; unwraps the `data` envelope."""
        try:
            resp = await self._client.get(path, **kwargs)
            if resp.status_code == 401:
                raise BirdeyeApiError("Invalid API key (401)")
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as e:
            raise BirdeyeApiError(f"HTTP {e.response.status_code}: {path}") from e
        except httpx.RequestError as e:
            raise BirdeyeApiError(f"Request failed: {path}: {e}") from e
        except ValueError as e:
            raise BirdeyeApiError(f"Invalid JSON: {path}") from e

        if not isinstance(data, dict):
            raise BirdeyeApiError(f"Unexpected payload: {path}")
        if not data.get("success", True):
            raise BirdeyeApiError(f"API error: {data.get('message', 'unknown')}")
        return data.get("data")

    async def get_trending_tokens(self) -> list[TokenSummary]:
        """Top 3 trending Solana tokens. Empty list when unavailable."""
        if not self._api_key:
            logger.debug("[BIRDEYE] No API key configured, skipping trending")
            return []

        try:
            data = await self._request("/defi/trending", params={"chain": "solana"})
            if not isinstance(data, dict):
                return []
            trending = BirdeyeTrendingList.model_validate(data)
        except (BirdeyeApiError, ValidationError) as e:
            logger.warning(f"[BIRDEYE] Trending tokens failed: {e}")
            return []

        return [
            TokenSummary(
                symbol=item.symbol,
                address=item.address,
                price=item.price,
                change_24h=item.priceChange24h or 0.0,
                volume_24h=item.volume24h or 0.0,
                name=item.name,
            )
            for item in trending.items[:MAX_TRENDING]
        ]

    async def close(self) -> None:
        await self._client.aclose()
