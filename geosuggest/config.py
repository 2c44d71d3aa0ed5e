"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeocoderSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://nominatim.openstreetmap.org/",
        description="Root of a Nominatim-compatible search API.",
    )
    user_agent: str = Field(default="geosuggest/0.1", min_length=1)
    result_limit: int = Field(default=5, ge=1, le=50)
    accept_language: str | None = None
    country_codes: str | None = Field(
        default=None,
        description="Comma separated ISO 3166-1 alpha-2 codes limiting the search.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)
    max_attempts: int = Field(default=1, ge=1, le=5)
    retry_base_delay: float = Field(default=0.5, ge=0)

    @field_validator("accept_language", "country_codes", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class WidgetSettings(BaseModel):
    debounce_ms: int = Field(default=300, ge=0, le=10_000)
    arrow_up_from_none: Literal["stay", "last"] = "stay"
    cancel_superseded: bool = True
    placeholder: str = "Search for a location..."
    listbox_id: str = Field(default="search-results", min_length=1)


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GEOSUGGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"

    geocoder: GeocoderSettings = Field(default_factory=GeocoderSettings)
    widget: WidgetSettings = Field(default_factory=WidgetSettings)


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "GeocoderSettings",
    "WidgetSettings",
    "get_settings",
]
