"""Style tokens per StyleVariant and the class-string helpers built on them."""

from __future__ import annotations

import math
import re

from quickpage.models.style import (
    ColorTokens,
    FontTokens,
    FontWeightTokens,
    RadiusTokens,
    ShadowTokens,
    SpacingTokens,
    StyleTokens,
    TextColorTokens,
)
from quickpage.models.vertical import StyleVariant

_REGULAR_WEIGHTS = FontWeightTokens(
    normal="font-normal", medium="font-medium", semibold="font-semibold", bold="font-bold"
)
_ROUNDED = RadiusTokens(sm="rounded-sm", md="rounded-md", lg="rounded-lg", xl="rounded-xl")
_SHADOWED = ShadowTokens(sm="shadow-sm", md="shadow-md", lg="shadow-lg", xl="shadow-2xl")
_GENEROUS_SPACING = SpacingTokens(xs="p-2", sm="p-4", md="p-6", lg="p-8", xl="p-12", xxl="p-16")

STYLE_TOKENS: dict[StyleVariant, StyleTokens] = {
    StyleVariant.LUXURY: StyleTokens(
        radius=_ROUNDED,
        shadow=_SHADOWED,
        font=FontTokens(scale=1.1, weight=_REGULAR_WEIGHTS),
        spacing=_GENEROUS_SPACING,
        colors=ColorTokens(
            primary="bg-amber-50",
            secondary="bg-amber-100",
            accent="bg-amber-500",
            background="bg-amber-50",
            surface="bg-white",
            border="border-amber-200",
            text=TextColorTokens(
                primary="text-amber-900", secondary="text-amber-700", muted="text-amber-600"
            ),
        ),
    ),
    StyleVariant.MINIMAL: StyleTokens(
        radius=RadiusTokens(sm="rounded-none", md="rounded-sm", lg="rounded-md", xl="rounded-lg"),
        shadow=ShadowTokens(sm="shadow-none", md="shadow-sm", lg="shadow-md", xl="shadow-lg"),
        font=FontTokens(
            scale=0.95,
            weight=FontWeightTokens(
                normal="font-light", medium="font-normal", semibold="font-medium", bold="font-semibold"
            ),
        ),
        spacing=SpacingTokens(xs="p-1", sm="p-2", md="p-4", lg="p-6", xl="p-8", xxl="p-12"),
        colors=ColorTokens(
            primary="bg-stone-50",
            secondary="bg-stone-100",
            accent="bg-amber-400",
            background="bg-stone-50",
            surface="bg-white",
            border="border-stone-200",
            text=TextColorTokens(
                primary="text-stone-900", secondary="text-stone-600", muted="text-stone-500"
            ),
        ),
    ),
    StyleVariant.TECH: StyleTokens(
        radius=RadiusTokens(sm="rounded-md", md="rounded-lg", lg="rounded-xl", xl="rounded-2xl"),
        shadow=_SHADOWED,
        font=FontTokens(scale=1.0, weight=_REGULAR_WEIGHTS),
        spacing=SpacingTokens(xs="p-3", sm="p-4", md="p-6", lg="p-8", xl="p-12", xxl="p-16"),
        colors=ColorTokens(
            primary="bg-slate-50",
            secondary="bg-slate-100",
            accent="bg-amber-500",
            background="bg-slate-50",
            surface="bg-white",
            border="border-slate-200",
            text=TextColorTokens(
                primary="text-slate-900", secondary="text-slate-700", muted="text-slate-600"
            ),
        ),
    ),
    StyleVariant.EDITORIAL: StyleTokens(
        radius=_ROUNDED,
        shadow=_SHADOWED,
        font=FontTokens(scale=1.05, weight=_REGULAR_WEIGHTS),
        spacing=_GENEROUS_SPACING,
        colors=ColorTokens(
            primary="bg-amber-50",
            secondary="bg-amber-100",
            accent="bg-amber-600",
            background="bg-amber-50",
            surface="bg-white",
            border="border-amber-300",
            text=TextColorTokens(
                primary="text-amber-900", secondary="text-amber-800", muted="text-amber-700"
            ),
        ),
    ),
}

FOCUS_RING_CLASS = "focus:outline-none focus:ring-2 focus:ring-amber-500 focus:ring-offset-2"

_BUTTON_SIZES = {
    "sm": "px-3 py-2 text-sm",
    "md": "px-6 py-3 text-base",
    "lg": "px-8 py-4 text-lg",
}

_HEADING_BASE_SIZES = {1: 4, 2: 3, 3: 2, 4: 1.5, 5: 1.25, 6: 1.125}


def get_style_tokens(variant: StyleVariant | str) -> StyleTokens:
    return STYLE_TOKENS[StyleVariant(variant)]


def _semantic_map(tokens: StyleTokens) -> dict[str, str]:
    return {
        "radius-sm": tokens.radius.sm,
        "radius-md": tokens.radius.md,
        "radius-lg": tokens.radius.lg,
        "radius-xl": tokens.radius.xl,
        "shadow-sm": tokens.shadow.sm,
        "shadow-md": tokens.shadow.md,
        "shadow-lg": tokens.shadow.lg,
        "shadow-xl": tokens.shadow.xl,
        "text-primary": tokens.colors.text.primary,
        "text-secondary": tokens.colors.text.secondary,
        "text-muted": tokens.colors.text.muted,
        "bg-primary": tokens.colors.primary,
        "bg-secondary": tokens.colors.secondary,
        "bg-accent": tokens.colors.accent,
        "bg-surface": tokens.colors.surface,
        "border-primary": tokens.colors.border,
    }


def apply_style_tokens(class_names: str, variant: StyleVariant | str) -> str:
    """Swap semantic class names (``radius-md``, ``text-muted``...) for concrete ones.

    Replacements run one after another in a fixed order, matching whole words
    only, so a concrete class produced by an earlier swap may itself be
    swapped by a later one (``shadow-sm`` maps to ``shadow-sm`` in most
    variants).
    """
    result = class_names
    for semantic, concrete in _semantic_map(get_style_tokens(variant)).items():
        result = re.sub(rf"\b{re.escape(semantic)}\b", concrete, result)
    return result


def focus_ring_class(variant: StyleVariant | str) -> str:
    return FOCUS_RING_CLASS


def button_class(variant: StyleVariant | str, size: str = "md") -> str:
    tokens = get_style_tokens(variant)
    return (
        f"{tokens.colors.accent} text-white {_BUTTON_SIZES[size]} {tokens.radius.md} "
        f"hover:opacity-90 transition-opacity {focus_ring_class(variant)}"
    )


def card_class(variant: StyleVariant | str) -> str:
    tokens = get_style_tokens(variant)
    return f"{tokens.colors.surface} border {tokens.colors.border} {tokens.radius.lg} {tokens.shadow.md}"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def heading_class(variant: StyleVariant | str, level: int) -> str:
    tokens = get_style_tokens(variant)
    size = _round_half_up(_HEADING_BASE_SIZES[level] * tokens.font.scale)
    return f"text-{size}xl {tokens.font.weight.bold} {tokens.colors.text.primary}"
