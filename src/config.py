"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # A host project's .env may carry keys that are not ours
        extra="ignore",
    )

    # Dice
    dice_seed: int | None = None  # Seeds the default random source when set

    # Debug
    debug: bool = False
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
