"""Shared test fixtures."""

from unittest.mock import MagicMock

import httpx
import pytest
from loguru import logger

from solbot.models import PriceSnapshot, SentimentReading, TokenSummary, WhaleTransfer


def _make_response(payload: object, status_code: int = 200) -> MagicMock:
    """Fake httpx response; raise_for_status mirrors httpx for error codes."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = str(payload)
    if status_code >= 400:
        request = httpx.Request("GET", "https://example.test")
        resp.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}",
            request=request,
            response=httpx.Response(status_code, request=request),
        )
    return resp


@pytest.fixture
def sol_snapshot() -> PriceSnapshot:
    return PriceSnapshot(
        price=125.50,
        change_24h=3.2,
        volume_24h=2.1e9,
        market_cap=60e9,
        circulating_supply=470_000_000,
        sentiment=65,
    )


@pytest.fixture
def trending_tokens() -> list[TokenSummary]:
    return [
        TokenSummary(symbol="BONK", address="DezX...B263", change_24h=12.34, volume_24h=45_600_000),
        TokenSummary(symbol="WIF", address="EKpQ...zcjm", change_24h=-4.56, volume_24h=12_000_000),
        TokenSummary(symbol="JUP", address="JUPy...vCN", change_24h=0.0, volume_24h=0.0),
    ]


@pytest.fixture
def whale_transfer() -> WhaleTransfer:
    return WhaleTransfer(
        amount=2000.4,
        from_account="5Q54...e4j1",
        to_account="9WzD...AWWM",
        timestamp=1700000000,
    )


@pytest.fixture
def fear_greed() -> SentimentReading:
    return SentimentReading(score=72, classification="Greed", timestamp="1700000000")


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
