"""Configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from gsheety.urls import SPREADSHEETS_BASE


class Settings(BaseSettings):
    """Settings loaded from ``GSHEETY_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GSHEETY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="none",
    )

    # Endpoint
    base_url: str = SPREADSHEETS_BASE
    user_agent: str = "gsheety/0.1.0"

    # Request timeout in seconds; None waits indefinitely
    timeout: float | None = 60.0

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
