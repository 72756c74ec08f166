"""
Runtime configuration read from the process environment.

The entrypoint calls load_dotenv() first, so a local .env file works the same
way as real environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://cloud.iexapis.com/stable"


@dataclass(frozen=True)
class Settings:
    iex_base_url: str = DEFAULT_BASE_URL
    iex_api_token: str = ""
    iex_timeout_seconds: float = 10.0
    symbols_path: str = "/iex/symbols"
    last_traded_price_path: str = "/iex/last-traded-price"
    historical_prices_path: str = "/iex/historical-prices"
    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            iex_base_url=env.get("IEX_BASE_URL", defaults.iex_base_url),
            iex_api_token=env.get("IEX_API_TOKEN", defaults.iex_api_token),
            iex_timeout_seconds=float(
                env.get("IEX_TIMEOUT_SECONDS", defaults.iex_timeout_seconds)
            ),
            symbols_path=env.get("SYMBOLS_PATH", defaults.symbols_path),
            last_traded_price_path=env.get(
                "LAST_TRADED_PRICE_PATH", defaults.last_traded_price_path
            ),
            historical_prices_path=env.get(
                "HISTORICAL_PRICES_PATH", defaults.historical_prices_path
            ).rstrip("/"),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
            log_format=env.get("LOG_FORMAT", defaults.log_format).lower(),
        )
