"""Minimal Solana JSON-RPC client used for the startup connectivity check."""

import httpx
from loguru import logger


class SolanaRpcClient:
    def __init__(self, rpc_url: str, timeout: float = 15.0) -> None:
        self._rpc_url = rpc_url
        self._client = httpx.AsyncClient(timeout=timeout)

    async def get_health(self) -> bool:
        """True when the node answers `getHealth` with "ok"."""
        payload = {"jsonrpc": "2.0", "id": 1, "method": "getHealth"}
        try:
            resp = await self._client.post(self._rpc_url, json=payload)
            if resp.status_code != 200:
                logger.warning(f"[RPC] getHealth HTTP {resp.status_code}")
                return False
            data = resp.json()
        except (httpx.RequestError, ValueError) as e:
            logger.warning(f"[RPC] getHealth failed: {e}")
            return False

        if not isinstance(data, dict) or "error" in data:
            logger.warning(f"[RPC] getHealth error: {data}")
            return False
        return data.get("result") == "ok"

    async def close(self) -> None:
        await self._client.aclose()
