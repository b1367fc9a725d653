"""CoinGecko public API client: SOL market data and top gainers.

Free tier, no key. One request per call, no retries: a failed call
degrades the cycle to fallback text.
"""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from solbot.models import PriceSnapshot, TokenSummary
from solbot.parsers.coingecko.models import CoinGeckoCoin, CoinGeckoMarket

BASE_URL = "https://api.coingecko.com/api/v3"

# Coin ids treated as Solana ecosystem when picking gainers
SOLANA_ECOSYSTEM_IDS = ("solana", "bonk", "wif", "myro", "jito")
MAX_GAINERS = 3


class CoinGeckoApiError(Exception):
    pass


class CoinGeckoClient:
    """Async client for the CoinGecko v3 public API."""

    def __init__(self, timeout: float = 15.0) -> None:
        self._client = httpx.AsyncClient(
            base_url=BASE_URL,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def _request(self, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.get(path, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise CoinGeckoApiError(f"HTTP {e.response.status_code}: {path}") from e
        except httpx.RequestError as e:
            raise CoinGeckoApiError(f"Request failed: {path}: {e}") from e
        except ValueError as e:
            raise CoinGeckoApiError(f"Invalid JSON: {path}") from e

    async def get_solana_snapshot(self) -> PriceSnapshot | None:
        """Fetch SOL price, volume, market cap and community sentiment."""
        try:
            data = await self._request("/coins/solana")
            coin = CoinGeckoCoin.model_validate(data)
        except (CoinGeckoApiError, ValidationError) as e:
            logger.warning(f"[COINGECKO] SOL snapshot failed: {e}")
            return None

        md = coin.market_data
        price = md.current_price.get("usd")
        if price is None:
            logger.warning("[COINGECKO] SOL snapshot has no USD price")
            return None

        return PriceSnapshot(
            price=price,
            change_24h=md.price_change_percentage_24h or 0.0,
            volume_24h=md.total_volume.get("usd", 0.0),
            market_cap=md.market_cap.get("usd", 0.0),
            circulating_supply=md.circulating_supply,
            sentiment=coin.sentiment_votes_up_percentage or 50.0,
        )

    async def get_top_gainers(self) -> list[TokenSummary]:
        """Fetch the biggest 24h movers and keep Solana ecosystem coins (max 3)."""
        try:
            data = await self._request(
                "/coins/markets",
                params={
                    "vs_currency": "usd",
                    "order": "percent_change_24h_desc",
                    "per_page": 10,
                    "sparkline": "false",
                },
            )
        except CoinGeckoApiError as e:
            logger.warning(f"[COINGECKO] Top gainers failed: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"[COINGECKO] Unexpected markets payload: {type(data).__name__}")
            return []

        gainers: list[TokenSummary] = []
        for raw in data:
            try:
                market = CoinGeckoMarket.model_validate(raw)
            except ValidationError:
                continue
            if not any(key in market.id for key in SOLANA_ECOSYSTEM_IDS):
                continue
            gainers.append(
                TokenSummary(
                    symbol=market.symbol.upper(),
                    address=market.id,
                    price=market.current_price,
                    change_24h=market.price_change_percentage_24h or 0.0,
                    volume_24h=market.total_volume or 0.0,
                    name=market.name,
                    market_cap=market.market_cap,
                )
            )
            if len(gainers) >= MAX_GAINERS:
                break
        return gainers

    async def close(self) -> None:
        await self._client.aclose()
