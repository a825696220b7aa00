"""Click CLI entry point for quickpage."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from quickpage.config import Settings
from quickpage.logging import configure_logging
from quickpage.models.vertical import DocumentKind, LayoutVariant, StyleVariant, Vertical

if TYPE_CHECKING:
    from quickpage.cache import PreviewCache
    from quickpage.models.preview import PreviewRequest, PreviewState

_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


def _get_cache(settings: Settings) -> PreviewCache | None:
    """Construct PreviewCache if Redis is configured, else None."""
    if not settings.cache_configured:
        return None
    from quickpage.cache import PreviewCache

    return PreviewCache(settings)


def _hint(vertical: str | None) -> dict[str, list[str]] | None:
    return {"verticals": [vertical]} if vertical else None


def _build_request(
    idea: str,
    persona: str | None,
    job: str | None,
    hint: str | None,
    seed: str | None,
    style: str | None,
    layout: str | None,
    preset_id: str | None,
) -> PreviewRequest:
    from quickpage.models.preview import ClassificationHint, PreviewRequest

    return PreviewRequest(
        idea=idea,
        persona=persona,
        job=job,
        hint=ClassificationHint(verticals=[hint]) if hint else None,
        seed=seed,
        style=StyleVariant(style) if style else None,
        layout_variant=LayoutVariant(layout) if layout else None,
        preset_id=preset_id,
    )


def _generate(
    settings: Settings,
    request: PreviewRequest,
    prd: Path | None = None,
    ux: Path | None = None,
) -> PreviewState:
    """Run the pipeline (through the cache when configured), then hydrate."""
    from quickpage.orchestrator import PreviewRunner

    runner = PreviewRunner(settings)
    cache = _get_cache(settings)
    state = cache.get(request) if cache is not None else None
    if state is None:
        state = runner.run(request)
        if cache is not None:
            cache.set(request, state)

    if prd is not None:
        state = runner.hydrate(state, prd.read_text(encoding="utf-8"), DocumentKind.PRD)
    if ux is not None:
        state = runner.hydrate(state, ux.read_text(encoding="utf-8"), DocumentKind.UX)
    return state


def _preview_options(fn):
    """Options shared by commands that generate a preview."""
    for option in reversed(
        [
            click.argument("idea"),
            click.option("--persona", default=None, help="Target persona"),
            click.option("--job", default=None, help="Job to be done"),
            click.option(
                "--hint",
                type=click.Choice([v.value for v in Vertical]),
                default=None,
                help="Force a vertical (upstream hint)",
            ),
            click.option("--seed", default=None, help="Layout seed (defaults to the idea)"),
            click.option(
                "--style",
                type=click.Choice([s.value for s in StyleVariant]),
                default=None,
                help="Style variant",
            ),
            click.option(
                "--layout",
                type=click.Choice([lv.value for lv in LayoutVariant]),
                default=None,
                help="Layout variant",
            ),
            click.option("--preset-id", default=None, help="Preset id within the vertical"),
            click.option("--prd", type=_FILE, default=None, help="PRD document to hydrate from"),
            click.option("--ux", type=_FILE, default=None, help="UX document to hydrate from"),
        ]
    ):
        fn = option(fn)
    return fn


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """quickpage: turn a one-line idea into a styled page preview."""
    ctx.ensure_object(dict)
    settings = Settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, log_format=settings.log_format)
    ctx.obj["settings"] = settings
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("idea")
@click.option("--persona", default=None, help="Target persona")
@click.option("--job", default=None, help="Job to be done")
@click.option("--hint", default=None, help="Upstream vertical suggestion")
@click.pass_context
def classify(
    ctx: click.Context, idea: str, persona: str | None, job: str | None, hint: str | None
) -> None:
    """Classify an idea into a vertical."""
    from quickpage.design.classifier import classify_detailed

    result = classify_detailed(idea, persona, job, _hint(hint))
    click.echo(f"{result.vertical.value} ({result.source.value})")
    if ctx.obj["verbose"] and result.scores:
        for vertical, score in sorted(result.scores.items(), key=lambda kv: -kv[1]):
            if score:
                click.echo(f"  {vertical.value:16s} {score}")


@cli.command()
@click.argument("idea")
def seed(idea: str) -> None:
    """Print the content model seeded from an idea."""
    from quickpage.design.extractor import seed_content

    click.echo(json.dumps(seed_content(idea).as_tree(), indent=2))


@cli.command()
@click.argument("document", type=_FILE)
@click.option(
    "--kind",
    type=click.Choice([k.value for k in DocumentKind]),
    required=True,
    help="Document type",
)
@click.option("--idea", default=None, help="Seed the content from this idea first")
@click.option("--content", "content_file", type=_FILE, default=None, help="Existing content JSON")
def hydrate(document: Path, kind: str, idea: str | None, content_file: Path | None) -> None:
    """Merge a PRD/UX document into a content model and print it."""
    from pydantic import ValidationError

    from quickpage.design.extractor import hydrate_from_document, seed_content
    from quickpage.models.content import ContentModel

    if content_file is not None:
        try:
            existing = ContentModel.model_validate_json(content_file.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise click.ClickException(
                f"Invalid content file {content_file}: {exc.error_count()} error(s)"
            ) from exc
    else:
        existing = seed_content(idea or "")

    hydrated = hydrate_from_document(document.read_text(encoding="utf-8"), existing, kind)
    click.echo(json.dumps(hydrated.as_tree(), indent=2))


@cli.command()
@_preview_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["summary", "html", "json"]),
    default="summary",
    help="Output format",
)
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), default=None)
@click.pass_context
def preview(
    ctx: click.Context,
    idea: str,
    persona: str | None,
    job: str | None,
    hint: str | None,
    seed: str | None,
    style: str | None,
    layout: str | None,
    preset_id: str | None,
    prd: Path | None,
    ux: Path | None,
    output_format: str,
    output: Path | None,
) -> None:
    """Generate a page preview for an idea."""
    from quickpage.design.renderer import render_page

    settings = ctx.obj["settings"]
    request = _build_request(idea, persona, job, hint, seed, style, layout, preset_id)
    state = _generate(settings, request, prd, ux)

    if output_format == "html":
        text = render_page(state.blocks)
    elif output_format == "json":
        text = state.model_dump_json(indent=2)
    else:
        lines = [
            f"Vertical: {state.vertical.value if state.vertical else '-'}"
            f" ({state.classification_source.value if state.classification_source else '-'})",
            f"Brand:    {state.content.brand_name if state.content else '-'}",
            f"Preset:   {state.preset_id or '(none)'}",
            f"Style:    {state.style.value} / layout {state.layout_variant.value}",
            "Blocks:",
        ]
        lines.extend(f"  {b.index}. {b.type}" for b in state.blocks)
        text = "\n".join(lines)

    if output is not None:
        output.write_text(text, encoding="utf-8")
        click.echo(f"Wrote {output}")
    else:
        click.echo(text)


@cli.command()
@click.argument("vertical", required=False)
def presets(vertical: str | None) -> None:
    """List catalog presets, optionally for one vertical."""
    from quickpage.design.presets import all_presets, lookup

    try:
        found = lookup(Vertical(vertical)) if vertical else list(all_presets())
    except ValueError:
        click.echo(f"Unknown vertical: {vertical}", err=True)
        sys.exit(1)

    if not found:
        click.echo("No presets found.")
        return
    for preset in found:
        click.echo(f"  {preset.id:26s} {preset.name:18s} {' > '.join(preset.block_types)}")


@cli.command()
@click.argument("variant", type=click.Choice([s.value for s in StyleVariant]))
def styles(variant: str) -> None:
    """Print the style tokens of a variant."""
    from quickpage.design.styles import get_style_tokens

    tokens = get_style_tokens(variant)
    click.echo(json.dumps(tokens.model_dump(by_alias=True), indent=2))


@cli.group()
def share() -> None:
    """Create and open share links."""


@share.command("create")
@_preview_options
@click.pass_context
def share_create(
    ctx: click.Context,
    idea: str,
    persona: str | None,
    job: str | None,
    hint: str | None,
    seed: str | None,
    style: str | None,
    layout: str | None,
    preset_id: str | None,
    prd: Path | None,
    ux: Path | None,
) -> None:
    """Generate a preview and print its share URL."""
    from quickpage.share import SharePayload, share_url

    settings = ctx.obj["settings"]
    request = _build_request(idea, persona, job, hint, seed, style, layout, preset_id)
    state = _generate(settings, request, prd, ux)
    if state.preset is None:
        click.echo("Nothing to share: no preset for this vertical.", err=True)
        sys.exit(1)
    click.echo(share_url(SharePayload.from_state(state), settings.share_base_url))


@share.command("open")
@click.argument("token")
def share_open(token: str) -> None:
    """Decode a share token (or URL fragment) and print the page HTML."""
    from quickpage.design.renderer import render_page
    from quickpage.share import decode_share_token, render_shared

    payload = decode_share_token(token.rsplit("#", 1)[-1])
    if payload is None:
        click.echo("Invalid share link.", err=True)
        sys.exit(1)
    click.echo(render_page(render_shared(payload).blocks))


@cli.group()
def cache() -> None:
    """Manage the preview cache (Redis)."""


@cache.command("ping")
@click.pass_context
def cache_ping(ctx: click.Context) -> None:
    """Check Redis connectivity."""
    from quickpage.cache import PreviewCache

    settings = ctx.obj["settings"]
    if not settings.redis_url:
        click.echo("Redis not configured (REDIS_URL is empty).")
        return

    pc = PreviewCache(settings)
    if pc.ping():
        click.echo("Redis: OK")
    else:
        click.echo("Redis: unreachable", err=True)
        sys.exit(1)


@cache.command("stats")
@click.pass_context
def cache_stats(ctx: click.Context) -> None:
    """Show preview cache statistics."""
    from quickpage.cache import PreviewCache

    settings = ctx.obj["settings"]
    if not settings.redis_url:
        click.echo("Redis not configured (REDIS_URL is empty).")
        return

    pc = PreviewCache(settings)
    if not pc.ping():
        click.echo("Redis: unreachable", err=True)
        sys.exit(1)

    stats = pc.stats()
    click.echo(f"  Total cached previews: {stats['total']}")
    if stats["by_vertical"]:
        for vertical in sorted(stats["by_vertical"]):
            click.echo(f"    {vertical}: {stats['by_vertical'][vertical]}")
    else:
        click.echo("  (no cached previews)")


@cache.command("purge")
@click.pass_context
def cache_purge(ctx: click.Context) -> None:
    """Delete all preview cache entries."""
    from quickpage.cache import PreviewCache

    settings = ctx.obj["settings"]
    if not settings.redis_url:
        click.echo("Redis not configured (REDIS_URL is empty).")
        return

    pc = PreviewCache(settings)
    if not pc.ping():
        click.echo("Redis: unreachable", err=True)
        sys.exit(1)

    count = pc.purge_all()
    click.echo(f"Purged {count} cached previews.")


@cli.command()
@click.option("--host", type=str, default=None, help="Bind host")
@click.option("--port", type=int, default=None, help="Bind port")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Start the FastAPI API server."""
    import uvicorn

    settings = ctx.obj["settings"]
    uvicorn.run(
        "quickpage.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
    )
