"""Style token records, one per StyleVariant."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RadiusTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    sm: str
    md: str
    lg: str
    xl: str


class ShadowTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    sm: str
    md: str
    lg: str
    xl: str


class FontWeightTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    normal: str
    medium: str
    semibold: str
    bold: str


class FontTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    scale: float
    weight: FontWeightTokens


class SpacingTokens(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    xs: str
    sm: str
    md: str
    lg: str
    xl: str
    xxl: str = Field(alias="2xl")


class TextColorTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    muted: str


class ColorTokens(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    border: str
    text: TextColorTokens


class StyleTokens(BaseModel):
    """Utility-class tokens consumed by block renderers and exporters."""

    model_config = ConfigDict(frozen=True)

    radius: RadiusTokens
    shadow: ShadowTokens
    font: FontTokens
    spacing: SpacingTokens
    colors: ColorTokens
