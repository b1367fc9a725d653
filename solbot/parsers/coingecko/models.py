"""Pydantic models for CoinGecko public API responses."""

from pydantic import BaseModel


class CoinGeckoMarketData(BaseModel):
    """`market_data` block of /coins/{id}. Amounts keyed by vs-currency."""

    current_price: dict[str, float]
    price_change_percentage_24h: float | None = None
    total_volume: dict[str, float] = {}
    market_cap: dict[str, float] = {}
    circulating_supply: float | None = None

    model_config = {"extra": "ignore"}


class CoinGeckoCoin(BaseModel):
    """Response from /coins/{id} (only the fields we post)."""

    id: str = ""
    symbol: str = ""
    market_data: CoinGeckoMarketData
    sentiment_votes_up_percentage: float | None = None

    model_config = {"extra": "ignore"}


class CoinGeckoMarket(BaseModel):
    """Single row from /coins/markets."""

    id: str
    symbol: str = ""
    name: str = ""
    current_price: float | None = None
    price_change_percentage_24h: float | None = None
    total_volume: float | None = None
    market_cap: float | None = None

    model_config = {"extra": "ignore"}
