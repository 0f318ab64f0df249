"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Unknown keys in the env files are ignored so the web client can share them
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", "apikey.env"],  # apikey.env overrides .env
    )

    # Application settings
    app_name: str = "SanctoMind Counselling API"
    environment: str = Field(default="local", validation_alias="SYSTEM_ENVIRONMENT")
    host: str = "0.0.0.0"
    port: int = Field(default=3000, description="Listening port")
    static_dir: str = Field(
        default="public", description="Web client directory, relative to main.py"
    )

    # Gemini settings
    gemini_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"

    # Database settings
    db_url: str = Field(default="", description="PostgreSQL connection string")
    db_ssl: bool = True
    db_pool_size: int = 5
    db_max_overflow: int = 5

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
