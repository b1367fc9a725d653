"""Tests for Helius whale-transfer scan."""

from unittest.mock import AsyncMock

import httpx
import pytest

from solbot.parsers.helius.client import HeliusClient, _parse_tx
from solbot.parsers.helius.models import HeliusNativeTransfer

WHALE_FROM = "5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1"
WHALE_TO = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


def _tx(lamports: int, sender: str = "small", receiver: str = "small2", ts: int = 1700000000) -> dict:
    return {
        "signature": f"sig{lamports}",
        "type": "TRANSFER",
        "timestamp": ts,
        "nativeTransfers": [
            {"fromUserAccount": sender, "toUserAccount": receiver, "amount": lamports},
        ],
    }


@pytest.fixture
def client():
    c = HeliusClient(api_key="test-key", min_whale_usd=100_000, sol_price_usd=125.0)
    c._client = AsyncMock()
    return c


class TestParseTx:
    def test_parse_native_transfers(self) -> None:
        tx = _parse_tx(_tx(5_000_000_000, WHALE_FROM, WHALE_TO))
        assert tx.signature == "sig5000000000"
        assert tx.first_native_transfer.amount == 5_000_000_000
        assert tx.first_native_transfer.from_user_account == WHALE_FROM

    def test_parse_without_transfers(self) -> None:
        tx = _parse_tx({"signature": "abc", "nativeTransfers": None})
        assert tx.first_native_transfer is None


class TestWhaleThreshold:
    def test_above_threshold(self, client) -> None:
        # 801 SOL * $125 = $100,125
        assert client.is_whale(HeliusNativeTransfer(amount=801 * 10**9)) is True

    def test_at_threshold_is_not_whale(self, client) -> None:
        # 800 SOL * $125 = exactly $100,000
        assert client.is_whale(HeliusNativeTransfer(amount=800 * 10**9)) is False


class TestGetWhaleTransfer:
    @pytest.mark.asyncio
    async def test_first_whale_wins(self, client, make_response) -> None:
        payload = [
            _tx(1_000_000_000),
            _tx(2_000_400_000_000, WHALE_FROM, WHALE_TO, ts=1700000123),
            _tx(9_000_000_000_000),
        ]
        client._client.get = AsyncMock(return_value=make_response(payload))

        whale = await client.get_whale_transfer()

        assert whale is not None
        assert whale.amount == pytest.approx(2000.4)
        assert whale.from_account == "5Q54...e4j1"
        assert whale.to_account == "9WzD...AWWM"
        assert whale.timestamp == 1700000123
        assert whale.type == "transfer"

    @pytest.mark.asyncio
    async def test_request_uses_api_key_param(self, client, make_response) -> None:
        client._client.get = AsyncMock(return_value=make_response([]))
        await client.get_whale_transfer()

        args, kwargs = client._client.get.await_args
        assert args[0] == "/transactions"
        assert kwargs["params"] == {"api-key": "test-key", "limit": 100}

    @pytest.mark.asyncio
    async def test_no_whales_returns_none(self, client, make_response) -> None:
        client._client.get = AsyncMock(return_value=make_response([_tx(10**9), {"signature": "x"}]))
        assert await client.get_whale_transfer() is None

    @pytest.mark.asyncio
    async def test_error_object_returns_none(self, client, make_response) -> None:
        client._client.get = AsyncMock(return_value=make_response({"error": "bad request"}))
        assert await client.get_whale_transfer() is None

    @pytest.mark.asyncio
    async def test_http_error_returns_none(self, client, make_response) -> None:
        client._client.get = AsyncMock(return_value=make_response([], status_code=500))
        assert await client.get_whale_transfer() is None

    @pytest.mark.asyncio
    async def test_network_error_returns_none(self, client) -> None:
        client._client.get = AsyncMock(side_effect=httpx.ConnectError("down"))
        assert await client.get_whale_transfer() is None

    @pytest.mark.asyncio
    async def test_no_api_key_skips_request(self) -> None:
        client = HeliusClient(api_key="")
        client._client = AsyncMock()

        assert await client.get_whale_transfer() is None
        client._client.get.assert_not_awaited()
