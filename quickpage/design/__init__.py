"""Design generation core: classify, extract, lay out, render.

Every function here is synchronous and free of I/O.
"""

from quickpage.design.classifier import classify, classify_detailed, score_verticals, suggest_vertical
from quickpage.design.extractor import (
    hydrate_from_document,
    hydrate_from_prd,
    hydrate_from_ux,
    seed_content,
)
from quickpage.design.layout import (
    SeededSequence,
    generate_layout_variant,
    layout_variants,
    shuffle_preset,
)
from quickpage.design.placeholders import replace_placeholders, substitute
from quickpage.design.presets import all_presets, get_preset, lookup
from quickpage.design.renderer import render_page, render_preset
from quickpage.design.styles import get_style_tokens

__all__ = [
    "SeededSequence",
    "all_presets",
    "classify",
    "classify_detailed",
    "generate_layout_variant",
    "get_preset",
    "get_style_tokens",
    "hydrate_from_document",
    "hydrate_from_prd",
    "hydrate_from_ux",
    "layout_variants",
    "lookup",
    "render_page",
    "render_preset",
    "replace_placeholders",
    "score_verticals",
    "seed_content",
    "shuffle_preset",
    "substitute",
    "suggest_vertical",
]
