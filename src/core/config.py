"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str

    log_level: str = "INFO"

    # Key seeded by the /bootstrap endpoint; replace it in the database after first deploy
    bootstrap_api_key: str = "CHANGE ME"
    bootstrap_company: str = "Wilcox Development Solutions"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
