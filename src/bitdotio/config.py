"""Client configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bitdotio.constants import API_URL


class Settings(BaseSettings):
    """Client settings loaded from environment (``BITDOTIO_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="BITDOTIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    token: str = Field(default="", description="bit.io access token")
    api_url: str = Field(default=API_URL, description="Developer API base URL")
    http_timeout: float = Field(
        default=30.0, gt=0, description="HTTP request timeout in seconds"
    )
    pool_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for opening pools and acquiring connections",
    )
    log_level: str = Field(default="WARNING", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
