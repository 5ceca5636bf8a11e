"""Application configuration."""

from functools import lru_cache
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from SIGNAL_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SIGNAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    log_datefmt: str = "%H:%M:%S"
    log_color: bool = True

    # Analyzers to run (empty = all registered)
    strategies: list[str] = []
    # Per-analyzer config overrides, e.g. {"mean_reversion": {"lookback_period": 30}}
    strategy_params: dict[str, dict[str, Any]] = {}

    # Kline history kept per instrument
    window: int = Field(default=200, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
