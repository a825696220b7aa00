"""Share links: a compact, URL-safe encoding of everything a preview needs.

Tokens are zlib-compressed JSON in unpadded base64url. Decoding is lenient
about a leading ``#`` (tokens travel in URL fragments) and strict about the
payload version; anything malformed decodes to None.
"""

from __future__ import annotations

import base64
import zlib
from typing import Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from quickpage.design.layout import generate_layout_variant
from quickpage.design.presets import get_preset
from quickpage.design.renderer import render_preset
from quickpage.models.content import ContentModel
from quickpage.models.preview import ClassificationSource, PreviewRequest, PreviewState
from quickpage.models.vertical import LayoutVariant, StyleVariant, Vertical

logger = structlog.get_logger()

SHARE_VERSION = 1
SHARE_PATH = "/preview/share"


class SharePayload(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    v: Literal[1] = SHARE_VERSION
    style: StyleVariant
    vertical: Vertical
    preset_id: str = Field(min_length=1)
    content: ContentModel
    seed: str | None = None
    layout: LayoutVariant = LayoutVariant.STANDARD

    @classmethod
    def from_state(cls, state: PreviewState) -> SharePayload:
        if state.vertical is None or state.content is None or state.preset_id is None:
            raise ValueError("Preview has no rendered preset to share")
        return cls(
            style=state.style,
            vertical=state.vertical,
            preset_id=state.preset_id,
            content=state.content,
            seed=state.seed,
            layout=state.layout_variant,
        )


def encode_share_token(payload: SharePayload) -> str:
    raw = payload.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    token = base64.urlsafe_b64encode(zlib.compress(raw, 9)).decode("ascii")
    return token.rstrip("=")


def decode_share_token(token: str) -> SharePayload | None:
    """Payload for *token*, or None when it is empty, corrupt or another version."""
    token = token.strip().removeprefix("#")
    if not token:
        return None
    try:
        padded = token + "=" * (-len(token) % 4)
        raw = zlib.decompress(base64.urlsafe_b64decode(padded.encode("ascii")))
        return SharePayload.model_validate_json(raw)
    except (ValueError, zlib.error) as exc:
        logger.debug("Rejected share token", error=str(exc)[:120])
        return None


def share_url(payload: SharePayload, base_url: str) -> str:
    return f"{base_url.rstrip('/')}{SHARE_PATH}#{encode_share_token(payload)}"


def render_shared(payload: SharePayload) -> PreviewState:
    """Rebuild the preview a share payload describes.

    The preset is looked up by id within the payload's vertical (falling back
    to that vertical's default); the layout seed defaults to the brand name.
    """
    seed = payload.seed if payload.seed is not None else payload.content.brand_name
    request = PreviewRequest(
        idea=payload.content.brand_name,
        seed=seed,
        style=payload.style,
        layout_variant=payload.layout,
        preset_id=payload.preset_id,
    )
    state = PreviewState(
        request=request,
        style=payload.style,
        layout_variant=payload.layout,
        seed=seed,
        vertical=payload.vertical,
        classification_source=ClassificationSource.HINT,
        content=payload.content,
    )

    base = get_preset(payload.vertical, payload.preset_id)
    if base is None:
        return state
    preset = generate_layout_variant(base, seed, payload.layout)
    return state.model_copy(
        update={"preset": preset, "blocks": render_preset(preset, payload.content, payload.style)}
    )
