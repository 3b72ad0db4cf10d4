"""
Merkle Whitelist - Configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    # Application
    APP_NAME: str = "Merkle Whitelist"
    VERSION: str = "1.0.0"
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Whitelist
    ADDRESSES_FILE: str = "eligible_addresses.txt"
    TARGET_ADDRESS: str = Field(
        default="0x742d35Cc6634C0532925a3b844Bc454e4438f44e",
        min_length=1,
    )

    # Metrics
    METRICS_ENABLED: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
