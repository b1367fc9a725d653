"""Pydantic models for X/Twitter API v2 responses."""

from pydantic import BaseModel


class PostedTweet(BaseModel):
    """`data` block returned by POST /2/tweets."""

    id: str
    text: str = ""
    edit_history_tweet_ids: list[str] = []

    model_config = {"extra": "ignore"}


class TweetCreateResponse(BaseModel):
    data: PostedTweet

    model_config = {"extra": "ignore"}
