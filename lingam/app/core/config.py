"""Application configuration using pydantic-settings."""

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

    # App
    app_name: str = "Lingam Aabharanam"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    # Secret key MUST be provided via environment (e.g. SECRET_KEY in .env)
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Back-office login
    admin_username: str = "admin"
    # bcrypt hash, required; see auth_service.hash_password
    admin_password_hash: str

    # API
    api_prefix: str = "/api/v1"
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Database
    database_url: str = "sqlite+aiosqlite:///./lingam.db"

    # Durable collection keys are "<prefix>-appointments", "<prefix>-customers", ...
    storage_key_prefix: str = "lingam"

    # Appointment booking hours (closing time is exclusive)
    business_open_time: str = "10:00"
    business_close_time: str = "18:00"
    slot_duration_minutes: int = 30


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
