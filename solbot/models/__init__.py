from solbot.models.market import (
    PriceSnapshot,
    SentimentReading,
    TokenSummary,
    WhaleTransfer,
    mask_address,
)

__all__ = [
    "PriceSnapshot",
    "TokenSummary",
    "WhaleTransfer",
    "SentimentReading",
    "mask_address",
]
