"""
Application settings and configuration.
"""

from functools import lru_cache
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application
    app_name: str = "SparkleGo Booking"
    app_version: str = "1.0.0"
    debug: bool = Field(default=False)

    # Database
    database_path: str = Field(default="sparkle.db")
    database_timeout: float = Field(default=30.0)
    seed_catalog: bool = Field(default=True)

    # Business
    currency: str = Field(default="EGP")
    timezone: str = Field(default="Africa/Cairo")
    support_email: str = Field(default="support@sparklego.com")

    # Notifications (Resend)
    resend_api_key: Optional[str] = Field(default=None)
    resend_api_base: str = Field(default="https://api.resend.com")
    notification_from: str = Field(default="SparkleGo <booking@resend.dev>")
    notification_timeout: float = Field(default=5.0)

    # HTTP gateway used by clients of the booking API
    api_base_url: str = Field(default="http://127.0.0.1:8001")
    http_timeout: float = Field(default=10.0)

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
