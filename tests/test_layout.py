"""Tests for seeded layout shuffling and layout variants."""

from __future__ import annotations

from collections import Counter

import pytest

from quickpage.design.layout import (
    DEFAULT_TESTIMONIAL_TITLE,
    FEATURED_PREFIX,
    SeededSequence,
    generate_layout_variant,
    hash_seed,
    layout_variants,
    shuffle_preset,
)
from quickpage.design.presets import all_presets, get_preset
from quickpage.models import blocks
from quickpage.models.blocks import (
    FeatureGridBlock,
    FeatureGridProps,
    FooterBlock,
    FooterProps,
    HeroBlock,
    HeroProps,
    LogoRowBlock,
    LogoRowProps,
    Preset,
    PricingBlock,
    PricingProps,
)
from quickpage.models.vertical import LayoutVariant, Vertical

SEEDS = ["", "a", "acme", "Cozy Cafe", "seed-42", "😀 emoji seed", "x" * 500]


def _small_preset() -> Preset:
    return Preset(
        id="small",
        name="Small",
        verticals=[Vertical.B2B_SAAS],
        blocks=[
            HeroBlock(props=HeroProps(brand_name="B", tagline="T", cta="C")),
            LogoRowBlock(props=LogoRowProps()),
            FeatureGridBlock(props=FeatureGridProps()),
            PricingBlock(props=PricingProps()),
            FooterBlock(props=FooterProps(brand_name="B")),
        ],
    )


class TestHashSeed:
    def test_known_values(self):
        assert hash_seed("") == 0
        assert hash_seed("a") == 97
        assert hash_seed("ab") == 97 * 31 + 98

    def test_hashes_utf16_code_units(self):
        # U+1F600 is the surrogate pair D83D DE00
        assert hash_seed("😀") == 0xD83D * 31 + 0xDE00

    def test_long_seed_stays_in_int32_range(self):
        value = hash_seed("overflow " * 200)
        assert 0 <= value <= 2**31


class TestSeededSequence:
    def test_first_value(self):
        assert SeededSequence("").next() == 49297 / 233280

    def test_values_in_unit_interval(self):
        sequence = SeededSequence("range check")
        for _ in range(200):
            assert 0 <= sequence.next() < 1

    def test_next_int_bounds(self):
        sequence = SeededSequence("ints")
        values = {sequence.next_int(2, 4) for _ in range(200)}
        assert values <= {2, 3, 4}

    def test_independent_instances(self):
        first = SeededSequence("same")
        second = SeededSequence("same")
        assert [first.next() for _ in range(5)] == [second.next() for _ in range(5)]


class TestShufflePreset:
    def test_known_order(self):
        shuffled = shuffle_preset(_small_preset(), "")
        assert shuffled.block_types == ["Hero", "Pricing", "FeatureGrid", "LogoRow", "Footer"]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_deterministic(self, seed: str):
        preset = get_preset(Vertical.B2B_SAAS)
        assert shuffle_preset(preset, seed) == shuffle_preset(preset, seed)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_anchors_and_permutation(self, seed: str):
        for preset in all_presets():
            shuffled = shuffle_preset(preset, seed)
            assert shuffled.block_types[0] == "Hero"
            assert shuffled.block_types[-1] == "Footer"
            assert Counter(shuffled.block_types) == Counter(preset.block_types)

    def test_input_not_mutated(self):
        preset = get_preset(Vertical.B2B_SAAS)
        before = preset.block_types
        shuffle_preset(preset, "mutation check")
        assert preset.block_types == before

    def test_metadata_preserved(self):
        preset = get_preset(Vertical.EVENT)
        shuffled = shuffle_preset(preset, "meta")
        assert (shuffled.id, shuffled.name, shuffled.verticals) == (
            preset.id,
            preset.name,
            preset.verticals,
        )

    def test_seed_changes_order(self):
        preset = get_preset(Vertical.B2B_SAAS)
        orders = {tuple(shuffle_preset(preset, f"seed-{i}").block_types) for i in range(25)}
        assert len(orders) > 1

    def test_two_middle_blocks_end_to_end(self):
        preset = Preset(
            id="four",
            name="Four",
            blocks=[
                HeroBlock(props=HeroProps(brand_name="B", tagline="T", cta="C")),
                LogoRowBlock(props=LogoRowProps()),
                FeatureGridBlock(props=FeatureGridProps()),
                FooterBlock(props=FooterProps(brand_name="B")),
            ],
        )
        assert shuffle_preset(preset, "x") == shuffle_preset(preset, "x")

        orders = set()
        for i in range(40):
            types = shuffle_preset(preset, f"seed-{i}").block_types
            assert types[0] == "Hero"
            assert types[-1] == "Footer"
            orders.add(tuple(types[1:-1]))
        assert orders == {("LogoRow", "FeatureGrid"), ("FeatureGrid", "LogoRow")}

    def test_without_anchors(self):
        preset = Preset(
            id="bare",
            name="Bare",
            blocks=[
                LogoRowBlock(props=LogoRowProps()),
                PricingBlock(props=PricingProps()),
            ],
        )
        shuffled = shuffle_preset(preset, "bare")
        assert sorted(shuffled.block_types) == ["LogoRow", "Pricing"]

    def test_empty_preset(self):
        preset = Preset(id="empty", name="Empty")
        assert shuffle_preset(preset, "x").blocks == []


class TestLayoutVariants:
    def test_standard_is_plain_shuffle(self):
        preset = get_preset(Vertical.B2B_SAAS)
        assert generate_layout_variant(preset, "s") == shuffle_preset(preset, "s")

    def test_minimal_keeps_core_blocks(self):
        preset = get_preset(Vertical.B2B_SAAS)
        minimal = generate_layout_variant(preset, "s", LayoutVariant.MINIMAL)
        assert minimal.block_types == ["Hero", "FeatureGrid", "Footer"]

    def test_featured_prefixes_testimonial_title(self):
        preset = get_preset(Vertical.B2B_SAAS)
        featured = generate_layout_variant(preset, "s", "featured")
        titles = [b.props.title for b in featured.blocks if isinstance(b, blocks.TestimonialBlock)]
        assert titles == [f"{FEATURED_PREFIX}What our customers say"]

    def test_featured_default_title(self):
        preset = _small_preset().model_copy(
            update={
                "blocks": [
                    *_small_preset().blocks[:-1],
                    blocks.TestimonialBlock(props=blocks.TestimonialProps()),
                    _small_preset().blocks[-1],
                ]
            }
        )
        featured = generate_layout_variant(preset, "s", LayoutVariant.FEATURED)
        testimonial = next(b for b in featured.blocks if isinstance(b, blocks.TestimonialBlock))
        assert testimonial.props.title == f"{FEATURED_PREFIX}{DEFAULT_TESTIMONIAL_TITLE}"

    def test_all_variants(self):
        variants = layout_variants(get_preset(Vertical.RESTAURANT), "seed")
        assert list(variants) == [
            LayoutVariant.STANDARD,
            LayoutVariant.MINIMAL,
            LayoutVariant.FEATURED,
        ]

    def test_unknown_variant_rejected(self):
        with pytest.raises(ValueError):
            generate_layout_variant(_small_preset(), "s", "cinematic")
