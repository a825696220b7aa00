"""FastAPI test client fixtures."""

from __future__ import annotations

from typing import Any

import fakeredis
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from quickpage.api.middleware import CorrelationIdMiddleware, add_exception_handlers
from quickpage.api.routes import catalog, previews, share, system
from quickpage.cache import PreviewCache
from quickpage.config import Settings
from quickpage.orchestrator import PreviewRunner


def _create_test_app(settings: Settings, cache: PreviewCache | None = None) -> FastAPI:
    """Create a FastAPI app with injected test settings/runner/cache (no lifespan)."""
    app = FastAPI(title="quickpage Test")

    app.state.settings = settings
    app.state.runner = PreviewRunner(settings)
    app.state.cache = cache

    app.add_middleware(CorrelationIdMiddleware)
    add_exception_handlers(app)

    prefix = "/api/v1"
    app.include_router(system.router, prefix=prefix)
    app.include_router(previews.router, prefix=prefix)
    app.include_router(catalog.router, prefix=prefix)
    app.include_router(share.router, prefix=prefix)

    return app


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    app = _create_test_app(settings)
    return TestClient(app)


@pytest.fixture()
def cached_client() -> TestClient:
    """Client whose app has a preview cache backed by fakeredis."""
    settings = Settings(
        redis_url="redis://localhost:6379/0",
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )
    cache = PreviewCache(settings)
    cache._client = fakeredis.FakeRedis(decode_responses=True)  # Inject fake Redis
    app = _create_test_app(settings, cache)
    return TestClient(app)


@pytest.fixture()
def preview_state(client: TestClient) -> dict[str, Any]:
    """A rendered preview state as returned by the API."""
    resp = client.post("/api/v1/previews", json={"idea": "Cozy Cafe", "seed": "api"})
    assert resp.status_code == 200
    return resp.json()["state"]
