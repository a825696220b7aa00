"""Tests for the click CLI."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest
import structlog
from click.testing import CliRunner

from quickpage.cli import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def cli_runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    """CliRunner with Redis disabled and logging silenced."""
    monkeypatch.setenv("REDIS_URL", "")
    monkeypatch.setenv("SHARE_BASE_URL", "https://pages.example.com")
    monkeypatch.setattr("quickpage.cli.configure_logging", lambda **kwargs: None)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL))
    yield CliRunner()
    structlog.reset_defaults()


class TestClassifyCommand:
    def test_keywords(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["classify", "A cozy Italian restaurant with a seasonal menu"])
        assert result.exit_code == 0
        assert "restaurant (keywords)" in result.output

    def test_hint(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["classify", "SaaS dashboard", "--hint", "event"])
        assert "event (hint)" in result.output

    def test_verbose_scores(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["-v", "classify", "restaurant menu"])
        assert result.exit_code == 0
        assert "restaurant" in result.output.splitlines()[1]


class TestContentCommands:
    def test_seed(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["seed", "Neighborhood bakery"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["brandName"] == "Neighborhood bakery"

    def test_hydrate(self, cli_runner: CliRunner, tmp_path: Path, sample_prd: str):
        document = tmp_path / "prd.md"
        document.write_text(sample_prd, encoding="utf-8")
        result = cli_runner.invoke(
            cli, ["hydrate", str(document), "--kind", "prd", "--idea", "Acme planner for busy teams"]
        )
        assert result.exit_code == 0
        tree = json.loads(result.stdout)
        assert tree["brandName"] == "Acme Planner"
        assert "Shared team boards" in tree["features"]

    def test_hydrate_existing_content(self, cli_runner: CliRunner, tmp_path: Path, sample_ux: str):
        document = tmp_path / "ux.md"
        document.write_text(sample_ux, encoding="utf-8")
        content = tmp_path / "content.json"
        content.write_text(json.dumps({"brandName": "Keep", "features": ["Existing feature"]}))
        result = cli_runner.invoke(
            cli, ["hydrate", str(document), "--kind", "ux", "--content", str(content)]
        )
        tree = json.loads(result.stdout)
        assert tree["features"] == ["Existing feature"]
        assert len(tree["faq"]) == 2

    @pytest.mark.parametrize(
        "payload",
        ["{not json", json.dumps({"features": ["f"] * 10})],
    )
    def test_hydrate_invalid_content_file(
        self, cli_runner: CliRunner, tmp_path: Path, sample_ux: str, payload: str
    ):
        document = tmp_path / "ux.md"
        document.write_text(sample_ux, encoding="utf-8")
        content = tmp_path / "content.json"
        content.write_text(payload)
        result = cli_runner.invoke(
            cli, ["hydrate", str(document), "--kind", "ux", "--content", str(content)]
        )
        assert result.exit_code == 1
        assert "Invalid content file" in result.output
        assert "Traceback" not in result.output


class TestPreviewCommand:
    def test_summary(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["preview", "A cozy Italian restaurant"])
        assert result.exit_code == 0
        assert "Vertical: restaurant (keywords)" in result.output
        assert "Preset:   restaurant_standard" in result.output
        assert "  0. Hero" in result.output

    def test_layout_minimal(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["preview", "Cozy Cafe", "--layout", "minimal"])
        assert "  0. Hero\n  1. FeatureGrid\n  2. Footer" in result.output

    def test_json(self, cli_runner: CliRunner):
        result = cli_runner.invoke(
            cli, ["preview", "Cozy Cafe", "--format", "json", "--style", "tech"]
        )
        state = json.loads(result.stdout)
        assert state["vertical"] == "restaurant"
        assert state["style"] == "tech"

    def test_html_to_file(self, cli_runner: CliRunner, tmp_path: Path):
        output = tmp_path / "page.html"
        result = cli_runner.invoke(
            cli, ["preview", "Cozy Cafe", "--format", "html", "-o", str(output)]
        )
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8").startswith('<div class="min-h-screen">')

    def test_with_prd(self, cli_runner: CliRunner, tmp_path: Path, sample_prd: str):
        document = tmp_path / "prd.md"
        document.write_text(sample_prd, encoding="utf-8")
        result = cli_runner.invoke(cli, ["preview", "Acme planner", "--prd", str(document)])
        assert "Brand:    Acme Planner" in result.output

    def test_invalid_style(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["preview", "Cozy Cafe", "--style", "neon"])
        assert result.exit_code != 0


class TestCatalogCommands:
    def test_presets_all(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["presets"])
        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 10

    def test_presets_for_vertical(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["presets", "restaurant"])
        assert "restaurant_standard" in result.output

    def test_presets_unknown_vertical(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["presets", "spaceship"])
        assert result.exit_code == 1
        assert "Unknown vertical: spaceship" in result.output

    def test_styles(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["styles", "luxury"])
        assert json.loads(result.stdout)["spacing"]["2xl"] == "p-16"


class TestShareCommands:
    def test_create_and_open(self, cli_runner: CliRunner):
        created = cli_runner.invoke(cli, ["share", "create", "Cozy Cafe", "--seed", "s1"])
        assert created.exit_code == 0
        url = created.stdout.strip()
        assert url.startswith("https://pages.example.com/preview/share#")

        opened = cli_runner.invoke(cli, ["share", "open", url])
        assert opened.exit_code == 0
        assert "Cozy Cafe" in opened.stdout

    def test_open_invalid(self, cli_runner: CliRunner):
        result = cli_runner.invoke(cli, ["share", "open", "garbage"])
        assert result.exit_code == 1
        assert "Invalid share link." in result.output


class TestCacheCommands:
    @pytest.mark.parametrize("command", ["ping", "stats", "purge"])
    def test_without_redis(self, cli_runner: CliRunner, command: str):
        result = cli_runner.invoke(cli, ["cache", command])
        assert result.exit_code == 0
        assert "Redis not configured" in result.output
