"""Health check and config endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from quickpage.api.deps import CacheDep, SettingsDep
from quickpage.api.schemas import ConfigCheckResponse, HealthResponse

router = APIRouter(tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    cache: CacheDep,
) -> HealthResponse:
    cache_ok = cache.ping() if cache is not None else False

    # The preview pipeline needs no backing service; a missing cache only
    # disables memoisation.
    return HealthResponse(
        status="healthy",
        version="0.1.0",
        cache_connected=cache_ok,
        checks={"pipeline": True, "cache": cache_ok},
    )


@router.get("/config/check", response_model=ConfigCheckResponse)
def config_check(
    settings: SettingsDep,
) -> ConfigCheckResponse:
    return ConfigCheckResponse(
        configured={
            "redis": bool(settings.redis_url),
            "preview_cache": settings.cache_configured,
            "share_base_url": bool(settings.share_base_url),
        }
    )
