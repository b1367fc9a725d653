"""Transient market records produced by the fetchers and consumed by formatters.

None of these outlive a single posting cycle.
"""

from dataclasses import dataclass


@dataclass
class PriceSnapshot:
    """SOL market data from CoinGecko /coins/solana."""

    price: float
    change_24h: float  # percent
    volume_24h: float  # USD
    market_cap: float  # USD
    circulating_supply: float | None = None
    sentiment: float = 50.0  # % of community up-votes


@dataclass
class TokenSummary:
    """One row of a trending or top-gainers list."""

    symbol: str
    address: str  # mint for Birdeye rows, coin id for CoinGecko rows
    price: float | None = None
    change_24h: float = 0.0
    volume_24h: float = 0.0
    name: str | None = None
    market_cap: float | None = None


@dataclass
class WhaleTransfer:
    """Largest recent native SOL transfer above the whale threshold."""

    amount: float  # SOL
    from_account: str  # masked
    to_account: str  # masked
    timestamp: int = 0
    type: str = "transfer"


@dataclass
class SentimentReading:
    """Fear & Greed index reading."""

    score: int  # 0-100
    classification: str
    timestamp: str = ""


def mask_address(address: str | None) -> str:
    """Shorten a base58 address to `abcd...wxyz`."""
    if not address:
        return "unknown"
    if len(address) <= 8:
        return address
    return f"{address[:4]}...{address[-4:]}"
