"""Redis-backed preview cache with native TTL.

Caches whole preview states by their generation parameters. The design
core never sees this cache; the API and CLI consult it around
``PreviewRunner.run``.
"""

from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, TypedDict, cast

import redis
import structlog
from pydantic import ValidationError

from quickpage.metrics import preview_cache_requests_total
from quickpage.models.preview import PreviewRequest, PreviewState

if TYPE_CHECKING:
    from quickpage.config import Settings

logger = structlog.get_logger()


class CacheStatsDict(TypedDict):
    """Statistics about the preview cache."""

    total: int
    by_vertical: dict[str, int]


class PreviewCache:
    """Cache for rendered previews backed by Redis.

    Keys: quickpage:preview:{vertical}:{sha256 of normalized request}
    Values: JSON-serialized PreviewState
    TTL: Native Redis TTL (configurable, default 24h)

    Lookups happen before classification, so ``get`` resolves the digest
    through an index key (quickpage:preview-index:{digest}) to the entry.
    """

    _PREFIX = "quickpage:preview"
    _INDEX_PREFIX = "quickpage:preview-index"

    def __init__(self, settings: Settings) -> None:
        # redis-py stubs: sync Redis.from_url returns Redis[bytes] by default
        self._client: redis.Redis = redis.Redis.from_url(
            settings.redis_url,
            decode_responses=True,
        )
        self._ttl_seconds = settings.preview_cache_ttl_hours * 3600
        self._settings = settings

    @staticmethod
    def _normalize(text: str | None) -> str:
        """Normalize free text for cache key: lowercase + collapse whitespace."""
        return " ".join((text or "").lower().split())

    def request_digest(self, request: PreviewRequest) -> str:
        """SHA-256 over the normalized generation parameters."""
        params = {
            "idea": self._normalize(request.idea),
            "persona": self._normalize(request.persona),
            "job": self._normalize(request.job),
            "hint": [self._normalize(v) for v in request.hint.verticals] if request.hint else [],
            "seed": request.seed if request.seed is not None else request.idea,
            "style": (request.style or self._settings.default_style).value,
            "layout": (request.layout_variant or self._settings.default_layout_variant).value,
            "preset_id": request.preset_id or "",
        }
        encoded = json.dumps(params, sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(encoded.encode("utf-8")).hexdigest()

    def _index_key(self, digest: str) -> str:
        return f"{self._INDEX_PREFIX}:{digest}"

    def _make_key(self, vertical: str, digest: str) -> str:
        return f"{self._PREFIX}:{vertical}:{digest}"

    def get(self, request: PreviewRequest) -> PreviewState | None:
        """Get the cached preview, or None on miss, expiry or Redis failure."""
        digest = self.request_digest(request)
        try:
            key = cast("str | None", self._client.get(self._index_key(digest)))
            raw = cast("str | None", self._client.get(key)) if key else None
        except redis.RedisError as exc:
            preview_cache_requests_total.labels(result="error").inc()
            logger.warning("preview_cache_unavailable", error=str(exc))
            return None

        if raw is None:
            preview_cache_requests_total.labels(result="miss").inc()
            return None
        try:
            state = PreviewState.model_validate_json(raw)
        except ValidationError:
            preview_cache_requests_total.labels(result="miss").inc()
            logger.warning("preview_cache_corrupt_entry", key=key)
            return None

        preview_cache_requests_total.labels(result="hit").inc()
        logger.debug("preview_cache_hit", idea=request.idea[:60])
        return state

    def set(self, request: PreviewRequest, state: PreviewState) -> None:
        """Cache a preview state with TTL. Redis failures are logged, not raised."""
        digest = self.request_digest(request)
        vertical = state.vertical.value if state.vertical else "none"
        key = self._make_key(vertical, digest)
        try:
            pipe = self._client.pipeline()
            pipe.set(key, state.model_dump_json(), ex=self._ttl_seconds)
            pipe.set(self._index_key(digest), key, ex=self._ttl_seconds)
            pipe.execute()
        except redis.RedisError as exc:
            logger.warning("preview_cache_unavailable", error=str(exc))
            return
        logger.debug("preview_cache_saved", vertical=vertical, idea=request.idea[:60])

    def _scan(self, pattern: str) -> list[str]:
        found: list[str] = []
        cursor: int = 0
        while True:
            # redis-py stubs return Awaitable|Any for sync calls, cast to actual type
            scan_result = cast(
                "tuple[int, list[str]]",
                self._client.scan(cursor, match=pattern, count=100),
            )
            cursor, keys = scan_result
            found.extend(keys)
            if cursor == 0:
                break
        return found

    def purge_all(self) -> int:
        """Delete all preview cache keys. Returns count of previews deleted."""
        previews = self._scan(f"{self._PREFIX}:*")
        index = self._scan(f"{self._INDEX_PREFIX}:*")
        if previews:
            self._client.delete(*previews)
        if index:
            self._client.delete(*index)
        return len(previews)

    def stats(self) -> CacheStatsDict:
        """Return cache statistics using SCAN (non-blocking)."""
        by_vertical: dict[str, int] = {}
        total = 0
        for key in self._scan(f"{self._PREFIX}:*"):
            total += 1
            # Key format: quickpage:preview:{vertical}:{digest}
            parts = str(key).split(":", 3)
            if len(parts) >= 3:
                by_vertical[parts[2]] = by_vertical.get(parts[2], 0) + 1
        return CacheStatsDict(total=total, by_vertical=by_vertical)

    def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(self._client.ping())
        except redis.ConnectionError:
            return False
