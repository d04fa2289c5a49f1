"""Application configuration from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Ephemeris
    swisseph_ephe_path: str = Field(default="", alias="SWISSEPH_EPHE_PATH")
    ephemeris_backend: str = Field(default="swieph", alias="EPHEMERIS_BACKEND")

    # Default observer (Metairie, LA)
    default_latitude: float = Field(default=29.9841, alias="DEFAULT_LATITUDE")
    default_longitude: float = Field(default=-90.1529, alias="DEFAULT_LONGITUDE")
    default_elevation: float = Field(default=0.0, alias="DEFAULT_ELEVATION")
    timezone: str = Field(default="UTC", alias="TIMEZONE")

    # Site
    site_url: str = Field(default="http://localhost:3000", alias="SITE_URL")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reset_settings_cache() -> None:
    """Clear cached settings (useful in tests)."""
    get_settings.cache_clear()
