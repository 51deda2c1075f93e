"""Configuration management using Pydantic settings."""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App settings
    project_name: str = Field(default="Study Tracker API", description="Application name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Database settings
    database_url: str = Field(..., description="Async database URL, e.g. postgresql+asyncpg://...")
    db_echo: bool = Field(default=False, description="Enable SQLAlchemy query logging")

    # JWT settings
    jwt_secret_key: str = Field(..., description="Secret key for JWT tokens")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(default=24 * 60, description="Access token expiry in minutes")
    refresh_token_expire_days: int = Field(default=7, description="Refresh token expiry in days")

    # Security settings
    bcrypt_rounds: int = Field(default=12, description="Bcrypt hashing rounds")

    # Points settings
    base_points_per_minute: int = Field(default=10, ge=0, description="Points credited per focused minute")

    # CORS settings
    backend_cors_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
