"""Helius API client: large native SOL transfers for whale alerts."""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError

from solbot.models import WhaleTransfer, mask_address
from solbot.parsers.helius.models import HeliusNativeTransfer, HeliusTransaction

API_URL = "https://api.helius.xyz/v0"
LAMPORTS_PER_SOL = 1_000_000_000
TX_LIMIT = 100


class HeliusApiError(Exception):
    pass


class HeliusClient:
    """Async HTTP client for Helius Enhanced API."""

    def __init__(
        self,
        api_key: str,
        *,
        min_whale_usd: float = 100_000.0,
        sol_price_usd: float = 125.0,
        timeout: float = 15.0,
    ) -> None:
        self._api_key = api_key
        self._min_whale_usd = min_whale_usd
        # Fixed approximate SOL price, not the live CoinGecko quote
        self._sol_price_usd = sol_price_usd
        self._client = httpx.AsyncClient(base_url=API_URL, timeout=timeout)

    async def _request(self, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.get(path, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise HeliusApiError(f"HTTP {e.response.status_code}: {path}") from e
        except httpx.RequestError as e:
            raise HeliusApiError(f"Request failed: {path}: {e}") from e
        except ValueError as e:
            raise HeliusApiError(f"Invalid JSON: {path}") from e

    def is_whale(self, transfer: HeliusNativeTransfer) -> bool:
        sol = transfer.amount / LAMPORTS_PER_SOL
        return sol * self._sol_price_usd > self._min_whale_usd

    async def get_whale_transfer(self) -> WhaleTransfer | None:
        """Most recent native transfer above the whale threshold, or None."""
        if not self._api_key:
            logger.debug("[HELIUS] No API key configured, skipping whale scan")
            return None

        try:
            data = await self._request(
                "/transactions",
                params={"api-key": self._api_key, "limit": TX_LIMIT},
            )
        except HeliusApiError as e:
            logger.warning(f"[HELIUS] Whale scan failed: {e}")
            return None

        if not isinstance(data, list):
            logger.warning(f"[HELIUS] Unexpected transactions payload: {type(data).__name__}")
            return None

        for raw in data:
            try:
                tx = _parse_tx(raw)
            except (ValidationError, AttributeError, TypeError):
                continue
            transfer = tx.first_native_transfer
            if transfer is None or not self.is_whale(transfer):
                continue
            return WhaleTransfer(
                amount=transfer.amount / LAMPORTS_PER_SOL,
                from_account=mask_address(transfer.from_user_account),
                to_account=mask_address(transfer.to_user_account),
                timestamp=tx.timestamp,
            )

        return None

    async def close(self) -> None:
        await self._client.aclose()


def _parse_tx(data: dict) -> HeliusTransaction:
    """Parse raw Helius enhanced transaction."""
    native_transfers = [
        HeliusNativeTransfer(
            from_user_account=t.get("fromUserAccount") or "",
            to_user_account=t.get("toUserAccount") or "",
            amount=t.get("amount") or 0,
        )
        for t in data.get("nativeTransfers") or []
    ]

    return HeliusTransaction(
        signature=data.get("signature", ""),
        type=data.get("type", ""),
        source=data.get("source", ""),
        timestamp=data.get("timestamp") or 0,
        native_transfers=native_transfers,
    )
