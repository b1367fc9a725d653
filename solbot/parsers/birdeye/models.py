"""Pydantic models for Birdeye Data Services API responses."""

from pydantic import BaseModel


class BirdeyeTrendingToken(BaseModel):
    """Single item from /defi/trending."""

    address: str = ""
    symbol: str = ""
    name: str | None = None
    price: float | None = None
    priceChange24h: float | None = None
    volume24h: float | None = None
    rank: int | None = None

    model_config = {"extra": "ignore"}


class BirdeyeTrendingList(BaseModel):
    """`data` block of /defi/trending."""

    items: list[BirdeyeTrendingToken] = []
    updateUnixTime: int | None = None

    model_config = {"extra": "ignore"}
