"""
Application settings.

Values come from environment variables prefixed with ``TIDEPOOL_`` or from a
``.env`` file in the working directory, e.g.::

    TIDEPOOL_PORT=8080
    TIDEPOOL_FISHBASE_API_URL=http://localhost:9000/api
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the API server and the site builder."""

    model_config = SettingsConfigDict(
        env_prefix="TIDEPOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Tidepool Marine Data Dashboard"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Upstream services
    fishbase_api_url: str = "https://fishbase.ropensci.org/api"
    obis_api_url: str = "https://api.obis.org/v3"
    marine_api_url: str = "https://marine-api.open-meteo.com/v1"
    weather_api_url: str = "https://api.open-meteo.com/v1"
    request_timeout: float = 10.0
    upstream_retries: int = 0

    # Dashboard composition
    dashboard_fish_count: int = 5
    dashboard_observation_count: int = 5
    default_lat: float = 37.5
    default_lon: float = -122.4

    # Front end
    site_dir: Path = Path("site")
    api_base_url: str = "http://localhost:3000/api"
    refresh_interval: float = 300.0
    startup_delay: float = 0.5
    retry_attempts: int = 3
    retry_base_delay: float = 1.0

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (cached after first call)."""
    return Settings()
