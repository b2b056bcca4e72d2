"""Application configuration via environment variables.

Uses pydantic-settings to load from .env file and environment variables.
The parser never reads settings; only the HTTP layer does.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ─── App ───
    environment: str = "development"
    log_level: str = "INFO"
    app_version: str = "0.1.0"

    # ─── Import Limits ───
    max_input_bytes: int = 20 * 1024 * 1024  # a full multi-decade HURDAT2 archive fits

    # ─── HTTP ───
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton.

    Uses lru_cache so Settings is only instantiated once.
    In tests, call `get_settings.cache_clear()` to reset.
    """
    return Settings()
