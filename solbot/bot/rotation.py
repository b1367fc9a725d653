"""Post kinds and the fixed rotation order."""

from enum import Enum


class PostKind(str, Enum):
    MARKET_UPDATE = "market_update"
    TRENDING = "trending_tokens"
    WHALE_ALERT = "whale_alert"
    GAINERS = "top_gainers"
    SENTIMENT = "sentiment_analysis"


ROTATION: tuple[PostKind, ...] = (
    PostKind.MARKET_UPDATE,
    PostKind.TRENDING,
    PostKind.WHALE_ALERT,
    PostKind.GAINERS,
    PostKind.SENTIMENT,
)


def kind_for(counter: int) -> PostKind:
    return ROTATION[counter % len(ROTATION)]
