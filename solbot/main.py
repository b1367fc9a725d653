"""Entry point for the SolBot market-pulse poster."""

import asyncio
import signal

from loguru import logger

from config.settings import settings
from solbot.bot.scheduler import MarketSources, PostScheduler
from solbot.parsers.birdeye.client import BirdeyeClient
from solbot.parsers.coingecko.client import CoinGeckoClient
from solbot.parsers.fear_greed.client import FearGreedClient
from solbot.parsers.helius.client import HeliusClient
from solbot.parsers.solana_rpc import SolanaRpcClient
from solbot.twitter.client import TwitterPublisher
from solbot.utils.logger import setup_logger

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Log stray task errors; the bot keeps running."""
    exc = context.get("exception")
    message = context.get("message", "Unhandled exception")
    if exc is not None:
        logger.opt(exception=exc).error(f"Unhandled exception: {message}")
    else:
        logger.error(f"Unhandled exception: {message}")


def build_sources() -> MarketSources:
    timeout = settings.http_timeout_sec
    return MarketSources(
        coingecko=CoinGeckoClient(timeout=timeout),
        birdeye=BirdeyeClient(settings.birdeye_api_key, timeout=timeout),
        helius=HeliusClient(
            settings.helius_api_key,
            min_whale_usd=settings.min_whale_amount_usd,
            sol_price_usd=settings.whale_sol_price_usd,
            timeout=timeout,
        ),
        fear_greed=FearGreedClient(timeout=timeout),
    )


def build_publisher() -> TwitterPublisher:
    if not settings.twitter_configured and not settings.dry_run:
        logger.warning("Twitter credentials incomplete, posts will fail")
    return TwitterPublisher(
        settings.twitter_api_key,
        settings.twitter_api_secret,
        settings.twitter_access_token,
        settings.twitter_access_secret,
        dry_run=settings.dry_run,
        timeout=settings.http_timeout_sec,
    )


async def check_rpc() -> None:
    rpc = SolanaRpcClient(settings.solana_rpc_url, timeout=settings.http_timeout_sec)
    try:
        healthy = await rpc.get_health()
    finally:
        await rpc.close()
    if healthy:
        logger.info(f"[RPC] Solana RPC healthy: {settings.solana_rpc_url}")
    else:
        logger.warning(f"[RPC] Solana RPC unhealthy: {settings.solana_rpc_url}")


async def main() -> None:
    setup_logger(level=settings.log_level)
    logger.info("Starting SolBot...")
    logger.info(
        "Connected APIs: CoinGecko (market data), Birdeye (DeFi analytics), "
        "Helius (whale tracking), Alternative.me (sentiment)"
    )

    loop = asyncio.get_running_loop()
    loop.set_exception_handler(_handle_loop_exception)
    shutdown_event = asyncio.Event()

    def _signal_handler() -> None:
        logger.info("Shutdown signal received")
        shutdown_event.set()

    for sig in SHUTDOWN_SIGNALS:
        loop.add_signal_handler(sig, _signal_handler)

    await check_rpc()

    sources = build_sources()
    publisher = build_publisher()
    scheduler = PostScheduler(
        sources,
        publisher,
        interval_sec=settings.post_interval_sec,
        whale_sol_price_usd=settings.whale_sol_price_usd,
    )

    try:
        await scheduler.run_loop(shutdown_event)
    finally:
        await sources.close()
        await publisher.close()
        for sig in SHUTDOWN_SIGNALS:
            loop.remove_signal_handler(sig)
        logger.info("Shutdown complete")


if __name__ == "__main__":
    asyncio.run(main())
