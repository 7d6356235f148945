"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Telegram Pinata Bridge")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=10000)

    # Request limits
    max_body_bytes: int = Field(
        default=50 * 1024 * 1024,
        description="Largest accepted request body (base64 uploads are large)",
    )

    # Pinata
    pinata_jwt: str = Field(
        default="",
        description="Pinata JWT used as bearer token for pinning requests",
    )
    pinata_api_url: str = Field(default="https://api.pinata.cloud")
    pinata_gateway_url: str = Field(default="https://gateway.pinata.cloud")
    pinata_fetch_timeout: float = Field(default=10.0)
    pinata_upload_timeout: float | None = Field(
        default=None,
        description="Upload timeout in seconds; unset means no timeout",
    )

    # Telegram Bot API
    telegram_bot_token: str = Field(default="")
    telegram_api_url: str = Field(default="https://api.telegram.org")
    telegram_timeout: float = Field(default=10.0)

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
