"""Format market records into post text.

Pure functions: same record in, same text out. Every post kind has a
canned fallback used when its data is absent.
"""

from solbot.models import PriceSnapshot, SentimentReading, TokenSummary, WhaleTransfer

MARKET_UPDATE_FALLBACK = (
    "📊 MARKET UPDATE\n\n"
    "$SOL data is refreshing... Back with live numbers shortly! ⏳\n\n"
    "#Solana #Trading"
)
TRENDING_FALLBACK = "🔍 Markets consolidating... Perfect time to DYOR! 🧐\n\n#Solana #Crypto"
WHALE_ALERT_FALLBACK = (
    "🐋 Whale watching active...\n\n"
    "No major movements detected in last hour.\n"
    "Markets stable! 📊\n\n"
    "#WhaleWatch #Solana"
)
GAINERS_FALLBACK = (
    "📊 Market consolidating across the board.\n\n"
    "Patience pays in trading! 🎯\n\n"
    "#Crypto #Trading"
)
SENTIMENT_FALLBACK = (
    "🧠 Market sentiment analysis in progress...\n\n"
    "Stay tuned for updates! 📊\n\n"
    "#CryptoSentiment"
)

TRENDING_EMOJIS = ("🚀", "💎", "🌙")
GAINER_MEDALS = ("🥇", "🥈", "🥉")


def format_price(value: float) -> str:
    return f"{value:.2f}"


def format_pct(value: float, digits: int = 2) -> str:
    """Percentage with an explicit `+` when the rounded value is positive."""
    rounded = round(value, digits) + 0.0  # folds -0.0 into 0.0
    sign = "+" if rounded > 0 else ""
    return f"{sign}{rounded:.{digits}f}"


def format_billions(value: float) -> str:
    return f"{value / 1e9:.2f}B"


def format_millions(value: float) -> str:
    return f"{value / 1e6:.1f}M"


def _sentiment_emoji(sentiment: float) -> str:
    if sentiment > 60:
        return "😃"
    if sentiment > 40:
        return "😐"
    return "😟"


def _fear_greed_emoji(score: int) -> str:
    if score >= 75:
        return "🟢"
    if score >= 50:
        return "🟡"
    if score >= 25:
        return "🟠"
    return "🔴"


def format_market_update(snapshot: PriceSnapshot | None) -> str:
    if snapshot is None:
        return MARKET_UPDATE_FALLBACK

    bullish = snapshot.change_24h > 0
    trend = "BULLISH" if bullish else "BEARISH"
    emoji = "🟢" if bullish else "🔴"

    return (
        "📊 MARKET UPDATE\n\n"
        f"$SOL: ${format_price(snapshot.price)} ({format_pct(snapshot.change_24h)}%)\n"
        f"24h Volume: ${format_billions(snapshot.volume_24h)}\n"
        f"Market Cap: ${format_billions(snapshot.market_cap)}\n\n"
        f"Momentum: {trend} {emoji}\n"
        f"Sentiment: {snapshot.sentiment:.0f}% {_sentiment_emoji(snapshot.sentiment)}\n\n"
        "#Solana #Trading #DeFi"
    )


def format_trending(tokens: list[TokenSummary]) -> str:
    if not tokens:
        return TRENDING_FALLBACK

    lines = ["🔥 TOP TRENDING (24h)\n"]
    for i, (token, emoji) in enumerate(zip(tokens, TRENDING_EMOJIS), start=1):
        lines.append(f"{i}. ${token.symbol} {format_pct(token.change_24h, 1)}% {emoji}")

    lines.append("")
    lines.append("⚠️ High volume = High volatility")
    lines.append("DYOR! 🧐\n")
    lines.append("#SolanaGems #Crypto")
    return "\n".join(lines)


def format_whale_alert(transfer: WhaleTransfer | None, sol_price_usd: float = 125.0) -> str:
    """Whale alert; USD value uses the fixed approximate SOL price."""
    if transfer is None:
        return WHALE_ALERT_FALLBACK

    value_usd = transfer.amount * sol_price_usd
    return (
        "🚨 WHALE ALERT 🚨\n\n"
        f"{transfer.amount:.0f} $SOL moved!\n"
        f"Value: ~${value_usd / 1000:.0f}K\n\n"
        f"From: {transfer.from_account}\n"
        f"To: {transfer.to_account}\n\n"
        "Smart money is moving! 👀\n\n"
        "#WhaleWatch #Solana"
    )


def format_gainers(tokens: list[TokenSummary]) -> str:
    if not tokens:
        return GAINERS_FALLBACK

    parts = ["📈 TOP GAINERS (24h)\n\n"]
    for token, medal in zip(tokens, GAINER_MEDALS):
        parts.append(f"{medal} ${token.symbol} {format_pct(token.change_24h, 1)}%\n")
        parts.append(f"   Vol: ${format_millions(token.volume_24h)}\n\n")

    parts.append("⚠️ Always DYOR!\n\n#SolanaGems #Crypto")
    return "".join(parts)


def format_sentiment(reading: SentimentReading | None, snapshot: PriceSnapshot | None) -> str:
    """Fear & Greed post; the $SOL line is dropped when no snapshot is available."""
    if reading is None:
        return SENTIMENT_FALLBACK

    lines = [
        "🧠 MARKET SENTIMENT\n",
        f"Fear & Greed Index: {reading.score}/100",
        f"Status: {reading.classification.upper()} {_fear_greed_emoji(reading.score)}\n",
    ]
    if snapshot is not None:
        arrow = "📈" if snapshot.change_24h > 0 else "📉"
        lines.append(f"$SOL: {arrow} {format_pct(snapshot.change_24h)}%\n")

    lines.append("Remember: Extreme fear = Opportunity")
    lines.append("Extreme greed = Caution\n")
    lines.append("#Sentiment #Trading")
    return "\n".join(lines)
