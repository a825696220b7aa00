"""Request/state models for one preview session."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from quickpage.models.blocks import Preset
from quickpage.models.content import ContentModel
from quickpage.models.vertical import LayoutVariant, StyleVariant, Vertical


class ClassificationSource(StrEnum):
    """Which rule decided a classification."""

    HINT = "hint"
    KEYWORDS = "keywords"
    CONTEXT = "context"
    DEFAULT = "default"


class ClassificationHint(BaseModel):
    """Upstream suggestion, e.g. the ``meta`` of a generated PRD.

    Only the first element of ``verticals`` is consulted.
    """

    model_config = ConfigDict(frozen=True)

    verticals: list[str] = Field(default_factory=list)


class Classification(BaseModel):
    model_config = ConfigDict(frozen=True)

    vertical: Vertical
    source: ClassificationSource
    scores: dict[Vertical, int] = Field(default_factory=dict)


class RenderedBlock(BaseModel):
    """One resolved block instance, ready for a presentation layer."""

    model_config = ConfigDict(frozen=True)

    type: str
    index: int = Field(description="Position of the block in the rendered preset")
    props: dict[str, Any] = Field(default_factory=dict)
    html: str = ""


class PreviewRequest(BaseModel):
    """Inputs of a preview run. Unset style/layout fall back to settings."""

    model_config = ConfigDict(frozen=True)

    idea: str
    persona: str | None = None
    job: str | None = None
    hint: ClassificationHint | None = None
    seed: str | None = Field(default=None, description="Layout seed; defaults to the idea text")
    style: StyleVariant | None = None
    layout_variant: LayoutVariant | None = None
    preset_id: str | None = None


class PreviewState(BaseModel):
    """Everything carried between pipeline stages.

    ``preset`` is the shuffled (and variant-transformed) preset; it is None
    when the catalog has nothing for the vertical.
    """

    model_config = ConfigDict(frozen=True)

    request: PreviewRequest
    style: StyleVariant
    layout_variant: LayoutVariant
    seed: str
    vertical: Vertical | None = None
    classification_source: ClassificationSource | None = None
    content: ContentModel | None = None
    preset: Preset | None = None
    blocks: list[RenderedBlock] = Field(default_factory=list)

    @property
    def preset_id(self) -> str | None:
        return self.preset.id if self.preset is not None else None
