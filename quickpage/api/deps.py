"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from quickpage.cache import PreviewCache
from quickpage.config import Settings
from quickpage.orchestrator import PreviewRunner


def _get_settings(request: Request) -> Settings:
    """Get the settings instance from app state."""
    return request.app.state.settings  # type: ignore[no-any-return]


def _get_runner(request: Request) -> PreviewRunner:
    """Get the preview runner from app state."""
    return request.app.state.runner  # type: ignore[no-any-return]


def _get_cache(request: Request) -> PreviewCache | None:
    """Get the preview cache, or None when caching is not configured."""
    return request.app.state.cache  # type: ignore[no-any-return]


SettingsDep = Annotated[Settings, Depends(_get_settings)]
RunnerDep = Annotated[PreviewRunner, Depends(_get_runner)]
CacheDep = Annotated[PreviewCache | None, Depends(_get_cache)]
