"""API request/response schemas (separate from domain models)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from quickpage.models.blocks import Preset
from quickpage.models.preview import ClassificationHint, PreviewState
from quickpage.models.vertical import DocumentKind, Vertical

# --- Requests ---


class ClassifyRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    idea: str = Field(min_length=1)
    persona: str | None = None
    job: str | None = None
    hint: ClassificationHint | None = None


class HydrateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: PreviewState
    document: str
    kind: DocumentKind
    hint: ClassificationHint | None = None


class ReclassifyRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: PreviewState
    vertical: Vertical


class ShareRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: PreviewState


# --- Responses ---


class ClassifyResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    vertical: Vertical
    source: str
    scores: dict[str, int]


class PreviewResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: PreviewState
    cached: bool = False
    suggested_vertical: Vertical | None = None


class PresetSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    verticals: list[Vertical]
    block_types: list[str]

    @classmethod
    def from_preset(cls, preset: Preset) -> PresetSummary:
        return cls(
            id=preset.id,
            name=preset.name,
            verticals=preset.verticals,
            block_types=preset.block_types,
        )


class PresetListResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    presets: list[PresetSummary]
    total: int


class ShareResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    url: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    version: str
    cache_connected: bool
    checks: dict[str, bool] = Field(default_factory=dict)


class ConfigCheckResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    configured: dict[str, bool]
