"""Application configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from quickpage.models.vertical import LayoutVariant, StyleVariant


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Preview defaults
    default_style: StyleVariant = StyleVariant.MINIMAL
    default_layout_variant: LayoutVariant = LayoutVariant.STANDARD
    share_base_url: str = "http://localhost:3000"

    # Preview cache (optional, empty URL disables it)
    redis_url: str = ""
    preview_cache_enabled: bool = True
    preview_cache_ttl_hours: int = 24

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    @property
    def cache_configured(self) -> bool:
        return bool(self.redis_url) and self.preview_cache_enabled
