"""Pydantic models for the alternative.me Fear & Greed API."""

from pydantic import BaseModel


class FearGreedEntry(BaseModel):
    """Single index value. The API sends numbers as strings."""

    value: int
    value_classification: str = ""
    timestamp: str = ""
    time_until_update: str | None = None

    model_config = {"extra": "ignore"}


class FearGreedResponse(BaseModel):
    name: str = ""
    data: list[FearGreedEntry] = []

    model_config = {"extra": "ignore"}
