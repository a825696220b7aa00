"""Tests for preset catalog and style token endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class TestPresets:
    def test_list_presets(self, client: TestClient):
        resp = client.get("/api/v1/presets")
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 10
        saas = next(p for p in data["presets"] if p["id"] == "b2b_saas_standard")
        assert saas["verticals"] == ["b2b_saas"]
        assert saas["block_types"][0] == "Hero"
        assert saas["block_types"][-1] == "Footer"

    def test_presets_for_vertical(self, client: TestClient):
        resp = client.get("/api/v1/presets/restaurant")
        assert resp.status_code == 200
        presets = resp.json()
        assert [p["id"] for p in presets] == ["restaurant_standard"]
        hero = presets[0]["blocks"][0]
        assert hero["type"] == "Hero"
        assert hero["props"]["brandName"] == "{{brandName}}"

    def test_unknown_vertical(self, client: TestClient):
        resp = client.get("/api/v1/presets/spaceship")
        assert resp.status_code == 400
        assert resp.json()["error"] == "bad_request"


class TestStyles:
    def test_style_tokens(self, client: TestClient):
        resp = client.get("/api/v1/styles/luxury")
        assert resp.status_code == 200
        data = resp.json()
        assert data["font"]["scale"] == 1.1
        assert data["spacing"]["2xl"] == "p-16"
        assert data["colors"]["text"]["primary"] == "text-amber-900"

    def test_unknown_style(self, client: TestClient):
        resp = client.get("/api/v1/styles/neon")
        assert resp.status_code == 400
