"""
Centralized configuration for the Commerce API.

All settings are loaded from environment variables with sensible defaults.
Integration settings are namespaced (e.g., STRIPE_*, SUPABASE_*, RESEND_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Commerce API"
    app_version: str = "0.1.0"
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    database_url: str = ""  # direct Postgres URI, used by run_migrations.py
    db_timeout_seconds: float = 5.0

    # Auth
    jwt_secret: str = ""
    jwt_expiry_hours: int = 24

    # Login rate limiting
    redis_url: str = "redis://localhost:6379/0"
    login_max_attempts: int = 5
    login_window_seconds: int = 15

    # Stripe
    stripe_secret_key: str = ""
    stripe_webhook_secret: str = ""
    stripe_payment_methods: list[str] = ["card", "bank_transfer"]
    stripe_supported_currencies: list[str] = ["inr", "usd", "eur"]

    # Email (Resend)
    resend_api_key: str = ""
    email_from_address: str = "noreply@example.com"
    email_from_name: str = "Notification Service"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
