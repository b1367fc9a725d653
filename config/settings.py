from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # X / Twitter (OAuth 1.0a user context, read+write app)
    twitter_api_key: str = ""
    twitter_api_secret: str = ""
    twitter_access_token: str = ""
    twitter_access_secret: str = ""

    # Birdeye Data Services (trending tokens)
    birdeye_api_key: str = ""

    # Helius Enhanced API (whale transfers)
    helius_api_key: str = ""

    # Solana RPC (startup connectivity check)
    solana_rpc_url: str = "https://api.mainnet-beta.solana.com"

    # Posting schedule
    post_interval_sec: int = 900  # 15 minutes

    # Whale alerts
    min_whale_amount_usd: float = 100_000.0
    whale_sol_price_usd: float = 125.0  # approximate, not the live price

    # HTTP
    http_timeout_sec: float = 15.0

    # Log posts instead of publishing them
    dry_run: bool = False

    # Console log level (file sink always captures DEBUG)
    log_level: str = "INFO"

    @property
    def twitter_configured(self) -> bool:
        return all(
            (
                self.twitter_api_key,
                self.twitter_api_secret,
                self.twitter_access_token,
                self.twitter_access_secret,
            )
        )


settings = Settings()
