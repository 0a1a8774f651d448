"""
Centralized configuration for the Tach accounts backend.

All settings are loaded from environment variables with sensible defaults.
Collaborator-specific settings are namespaced (e.g., SUPABASE_*, SMTP_*).
"""

from functools import lru_cache
from pydantic import field_validator
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
    app_name: str = "Tach Color Store"
    app_version: str = "0.1.0"
    debug: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_timeout: int = 10

    # Tables
    users_table: str = "users"
    accounts_table: str = "accounts"
    user_addresses_table: str = "user_addresses"

    # Outbound email and links
    tach_email_source: str = ""
    next_public_base_url: str = "http://localhost:3000"

    # Tokens
    token_secret: str = ""
    token_algorithm: str = "HS256"
    verification_token_ttl: str = "14d"
    password_reset_token_ttl: str = "30m"

    # Credentials
    password_hash_rounds: int = 10

    # SMTP (leave SMTP_HOST empty to log emails instead of sending them)
    smtp_host: str = ""
    smtp_port: int = 465
    smtp_user: str = ""
    smtp_password: str = ""

    @field_validator("next_public_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
