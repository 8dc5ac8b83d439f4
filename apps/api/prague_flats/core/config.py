"""Application configuration for the listings site."""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")
    cors_allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    # An http(s) URL is fetched over HTTP; any other value is a local file path. Empty means the bundled dataset.
    properties_source: str = Field(default="")

    notification_ttl_seconds: float = Field(default=5.0, gt=0)
    default_stay_days: int = Field(default=180, ge=1)

    currency_symbol: str = Field(default="$")
    placeholder_image_url: str = Field(default="https://via.placeholder.com/600x400?text=No+Image")

    map_center_lat: float = Field(default=50.0755)
    map_center_lng: float = Field(default=14.4378)
    map_zoom: int = Field(default=12, ge=1, le=19)
    map_tile_url: str = Field(default="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png")
    map_attribution: str = Field(default="© OpenStreetMap contributors")

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> object:
        """Accept a JSON list or comma-separated env value for CORS origins."""

        if isinstance(value, str):
            if value.strip().startswith("["):
                return json.loads(value)
            parts = [item.strip() for item in value.split(",") if item.strip()]
            return parts
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


settings = get_settings()
