"""Share-link endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from quickpage.api.deps import SettingsDep
from quickpage.api.schemas import PreviewResponse, ShareRequest, ShareResponse
from quickpage.share import SharePayload, decode_share_token, encode_share_token, render_shared, share_url

router = APIRouter(prefix="/share", tags=["share"])


@router.post("", response_model=ShareResponse)
def create_share_link(
    body: ShareRequest,
    settings: SettingsDep,
) -> ShareResponse:
    payload = SharePayload.from_state(body.state)
    return ShareResponse(
        token=encode_share_token(payload),
        url=share_url(payload, settings.share_base_url),
    )


@router.get("/{token}", response_model=PreviewResponse)
def open_share_link(token: str) -> PreviewResponse:
    payload = decode_share_token(token)
    if payload is None:
        raise HTTPException(status_code=404, detail="Share link is invalid or expired")
    return PreviewResponse(state=render_shared(payload))
