"""Post-rotation scheduler.

One counter, one post per tick. Kind is ROTATION[counter % 5]; the first
cycle runs immediately, then every `interval_sec`. Cycles run one after
another in a single task, so they never overlap.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime

from loguru import logger

from solbot.bot.formatters import (
    format_gainers,
    format_market_update,
    format_sentiment,
    format_trending,
    format_whale_alert,
)
from solbot.bot.rotation import PostKind, kind_for
from solbot.parsers.birdeye.client import BirdeyeClient
from solbot.parsers.coingecko.client import CoinGeckoClient
from solbot.parsers.fear_greed.client import FearGreedClient
from solbot.parsers.helius.client import HeliusClient
from solbot.twitter.client import TwitterPublisher


@dataclass
class MarketSources:
    """Provider clients used by the post builders."""

    coingecko: CoinGeckoClient
    birdeye: BirdeyeClient
    helius: HeliusClient
    fear_greed: FearGreedClient

    async def close(self) -> None:
        await self.coingecko.close()
        await self.birdeye.close()
        await self.helius.close()
        await self.fear_greed.close()


class PostScheduler:
    """Rotates through post kinds and publishes one post per cycle."""

    def __init__(
        self,
        sources: MarketSources,
        publisher: TwitterPublisher,
        *,
        interval_sec: float = 900,
        whale_sol_price_usd: float = 125.0,
    ) -> None:
        self._sources = sources
        self._publisher = publisher
        self._interval_sec = interval_sec
        self._whale_sol_price_usd = whale_sol_price_usd
        self._counter = 0
        self._builders: dict[PostKind, Callable[[], Awaitable[str]]] = {
            PostKind.MARKET_UPDATE: self._build_market_update,
            PostKind.TRENDING: self._build_trending,
            PostKind.WHALE_ALERT: self._build_whale_alert,
            PostKind.GAINERS: self._build_gainers,
            PostKind.SENTIMENT: self._build_sentiment,
        }

    @property
    def counter(self) -> int:
        return self._counter

    async def _build_market_update(self) -> str:
        logger.info("[SCHEDULER] Fetching SOL data from CoinGecko...")
        snapshot = await self._sources.coingecko.get_solana_snapshot()
        if snapshot:
            logger.info(f"[SCHEDULER] Live data: SOL ${snapshot.price:.2f}")
        else:
            logger.debug("[SCHEDULER] No SOL snapshot, using market update fallback")
        return format_market_update(snapshot)

    async def _build_trending(self) -> str:
        logger.info("[SCHEDULER] Fetching trending tokens from Birdeye...")
        tokens = await self._sources.birdeye.get_trending_tokens()
        logger.info(f"[SCHEDULER] Live data: {len(tokens)} trending tokens")
        return format_trending(tokens)

    async def _build_whale_alert(self) -> str:
        logger.info("[SCHEDULER] Fetching whale movements from Helius...")
        transfer = await self._sources.helius.get_whale_transfer()
        logger.info(f"[SCHEDULER] Live data: {'whale detected' if transfer else 'no whales'}")
        return format_whale_alert(transfer, self._whale_sol_price_usd)

    async def _build_gainers(self) -> str:
        logger.info("[SCHEDULER] Fetching top gainers from CoinGecko...")
        gainers = await self._sources.coingecko.get_top_gainers()
        logger.info(f"[SCHEDULER] Live data: {len(gainers)} top gainers")
        return format_gainers(gainers)

    async def _build_sentiment(self) -> str:
        logger.info("[SCHEDULER] Fetching sentiment & SOL data...")
        reading = await self._sources.fear_greed.get_fear_greed()
        snapshot = await self._sources.coingecko.get_solana_snapshot()
        if reading:
            logger.info(f"[SCHEDULER] Live data: F&G index {reading.score}")
        else:
            logger.debug("[SCHEDULER] No Fear & Greed reading, using sentiment fallback")
        if snapshot is None:
            logger.debug("[SCHEDULER] No SOL snapshot, sentiment post drops the $SOL line")
        return format_sentiment(reading, snapshot)

    async def build_post(self, kind: PostKind) -> str:
        return await self._builders[kind]()

    async def run_cycle(self) -> bool:
        """Build and publish one post. Returns True if a post went out."""
        kind = kind_for(self._counter)
        self._counter += 1
        logger.info(
            f"[SCHEDULER] Generating post #{self._counter} "
            f"({datetime.now():%Y-%m-%d %H:%M:%S}) type={kind.value}"
        )

        try:
            content = await self.build_post(kind)
            if not content:
                logger.warning("[SCHEDULER] No content generated, skipping post")
                return False
            return await self._publisher.publish(content)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception(f"[SCHEDULER] Error generating {kind.value} post")
            return False

    async def run_loop(self, stop_event: asyncio.Event) -> None:
        """Run cycles until `stop_event` is set. First cycle runs immediately."""
        logger.info(f"[SCHEDULER] Posting every {self._interval_sec / 60:g} minutes")
        next_tick = time.monotonic()

        while not stop_event.is_set():
            now = time.monotonic()
            if now < next_tick:
                try:
                    await asyncio.wait_for(stop_event.wait(), timeout=next_tick - now)
                except asyncio.TimeoutError:
                    pass
                continue

            try:
                await self.run_cycle()
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("[SCHEDULER] Cycle crashed")

            next_tick += self._interval_sec
            if next_tick < time.monotonic() - self._interval_sec:
                next_tick = time.monotonic() + self._interval_sec

        logger.info("[SCHEDULER] Stopped")
