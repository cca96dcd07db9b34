"""Application configuration loaded from environment variables.

Values may also come from a `.env` file in the working directory. Use
`get_settings()` everywhere instead of instantiating `Settings` directly so
the parsed configuration is shared.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError

DEFAULT_SECRET_KEY = "change-me-in-production"


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "FitSync API"
    app_version: str = "1.0.0"
    environment: str = "development"

    # Database. READ_DATABASE_URL may point at a replica; defaults to the primary.
    database_url: str = "sqlite:///fitsync.db"
    read_database_url: Optional[str] = None

    # Auth
    secret_key: str = DEFAULT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 30

    # Comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:3001"

    # Logging
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    # Seed demo users, meals and workouts when the app starts
    seed_on_startup: bool = False

    @property
    def effective_read_database_url(self) -> str:
        return self.read_database_url or self.database_url

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


def validate_settings(settings: Settings) -> None:
    """Reject configurations that must not reach production.

    Raises:
        ConfigurationError: If a production deployment still uses the
            built-in secret key.
    """
    if settings.environment == "production" and settings.secret_key == DEFAULT_SECRET_KEY:
        raise ConfigurationError("SECRET_KEY must be set in production", config_key="SECRET_KEY")
