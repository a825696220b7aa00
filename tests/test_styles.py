"""Tests for style tokens and class-string helpers."""

from __future__ import annotations

import pytest

from quickpage.design.styles import (
    FOCUS_RING_CLASS,
    STYLE_TOKENS,
    apply_style_tokens,
    button_class,
    card_class,
    focus_ring_class,
    get_style_tokens,
    heading_class,
)
from quickpage.models.vertical import StyleVariant


class TestTokens:
    def test_every_variant_defined(self):
        assert set(STYLE_TOKENS) == set(StyleVariant)

    def test_lookup_by_string(self):
        assert get_style_tokens("tech").radius.md == "rounded-lg"

    def test_unknown_variant(self):
        with pytest.raises(ValueError):
            get_style_tokens("brutalist")

    def test_spacing_serializes_2xl(self):
        dumped = get_style_tokens(StyleVariant.LUXURY).model_dump(by_alias=True)
        assert dumped["spacing"]["2xl"] == "p-16"


class TestApplyStyleTokens:
    def test_semantic_swap(self):
        assert apply_style_tokens("radius-md shadow-lg text-muted", "minimal") == (
            "rounded-sm shadow-md text-stone-500"
        )

    def test_whole_words_only(self):
        assert apply_style_tokens("radius-mdx", "tech") == "radius-mdx"

    def test_colors(self):
        assert apply_style_tokens("bg-accent border-primary", StyleVariant.EDITORIAL) == (
            "bg-amber-600 border-amber-300"
        )

    def test_unrelated_classes_untouched(self):
        assert apply_style_tokens("flex items-center", "luxury") == "flex items-center"


class TestClassHelpers:
    def test_button(self):
        assert button_class("tech", "lg") == (
            "bg-amber-500 text-white px-8 py-4 text-lg rounded-lg "
            "hover:opacity-90 transition-opacity " + FOCUS_RING_CLASS
        )

    def test_button_default_size(self):
        assert "px-6 py-3 text-base" in button_class(StyleVariant.MINIMAL)

    def test_card(self):
        assert card_class("minimal") == "bg-white border border-stone-200 rounded-md shadow-sm"

    def test_focus_ring_same_for_all(self):
        assert {focus_ring_class(v) for v in StyleVariant} == {FOCUS_RING_CLASS}

    @pytest.mark.parametrize(
        "variant, level, expected",
        [
            ("luxury", 1, "text-4xl font-bold text-amber-900"),
            ("luxury", 4, "text-2xl font-bold text-amber-900"),
            ("minimal", 4, "text-1xl font-semibold text-stone-900"),
            ("tech", 4, "text-2xl font-bold text-slate-900"),
            ("editorial", 2, "text-3xl font-bold text-amber-900"),
        ],
    )
    def test_heading(self, variant: str, level: int, expected: str):
        assert heading_class(variant, level) == expected
