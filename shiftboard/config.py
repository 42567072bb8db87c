"""Application configuration via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal

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

    # Application
    app_name: str = "Ohay Solutions Tool"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    # Deployment site (single location, shown on every block)
    location: str = "Duisburg"

    # Display
    display_timezone: str = "Europe/Berlin"

    # Identifiers
    id_suffix_length: int = Field(default=6, ge=4, le=16)

    # Admission
    # Off: capacity is only reported as ``is_full`` to the staff panel, an
    # admin may still approve past capacity. On: requests and approvals on a
    # full block are rejected.
    enforce_capacity: bool = False

    # Create the three demo blocks for today on startup
    seed_demo_blocks: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
