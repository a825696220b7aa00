"""Preset catalog and style token endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from quickpage.api.schemas import PresetListResponse, PresetSummary
from quickpage.design.presets import all_presets, lookup
from quickpage.design.styles import get_style_tokens
from quickpage.models.blocks import Preset
from quickpage.models.style import StyleTokens
from quickpage.models.vertical import StyleVariant, Vertical

router = APIRouter(tags=["catalog"])


@router.get("/presets", response_model=PresetListResponse)
def list_presets() -> PresetListResponse:
    presets = [PresetSummary.from_preset(p) for p in all_presets()]
    return PresetListResponse(presets=presets, total=len(presets))


@router.get("/presets/{vertical}", response_model=list[Preset])
def presets_for_vertical(vertical: str) -> list[Preset]:
    return lookup(Vertical(vertical))


@router.get("/styles/{variant}", response_model=StyleTokens)
def style_tokens(variant: str) -> StyleTokens:
    return get_style_tokens(StyleVariant(variant))
