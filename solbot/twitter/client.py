"""X/Twitter API v2 publisher.

Posts with OAuth 1.0a user context (consumer key/secret + access
token/secret of the bot account). No retries: a failed post is logged
and the cycle ends.
"""

from typing import Any

import httpx
from authlib.integrations.httpx_client import AsyncOAuth1Client
from loguru import logger
from pydantic import ValidationError

from solbot.twitter.models import PostedTweet, TweetCreateResponse

TWEETS_URL = "https://api.twitter.com/2/tweets"


class TwitterApiError(Exception):
    """X/Twitter API error."""


class TwitterPublisher:
    """Publishes post text to the bot account."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        access_token: str,
        access_secret: str,
        *,
        dry_run: bool = False,
        timeout: float = 15.0,
    ) -> None:
        self._dry_run = dry_run
        self._client = AsyncOAuth1Client(
            api_key,
            api_secret,
            token=access_token,
            token_secret=access_secret,
            timeout=timeout,
        )

    async def _create_tweet(self, text: str) -> PostedTweet:
        try:
            resp = await self._client.post(TWEETS_URL, json={"text": text})
            resp.raise_for_status()
            data: Any = resp.json()
            return TweetCreateResponse.model_validate(data).data
        except httpx.HTTPStatusError as e:
            raise TwitterApiError(
                f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise TwitterApiError(f"Request failed: {e}") from e
        except (ValueError, ValidationError) as e:
            raise TwitterApiError(f"Malformed response: {e}") from e

    async def publish(self, text: str) -> bool:
        """Post `text`. Returns success; never raises."""
        if self._dry_run:
            logger.info(f"[TWITTER] Dry run, not posting:\n{text}")
            return True

        try:
            tweet = await self._create_tweet(text)
        except TwitterApiError as e:
            logger.error(f"[TWITTER] Error posting tweet: {e}")
            return False

        logger.info(f"[TWITTER] Tweet posted: {tweet.id}")
        logger.info(f"[TWITTER] Content:\n{text}")
        return True

    async def close(self) -> None:
        await self._client.aclose()
