"""Layout variants: seeded, reproducible reordering of preset blocks.

The same ``(preset, seed)`` always yields the same order. The first Hero
stays first and the first Footer stays last; everything between them is
permuted with a Fisher-Yates pass driven by ``SeededSequence``.
"""

from __future__ import annotations

import math

from quickpage.models.blocks import ANCHOR_TYPES, BlockType, Preset, TestimonialBlock
from quickpage.models.vertical import LayoutVariant

_MODULUS = 233280
_MULTIPLIER = 9301
_INCREMENT = 49297

MINIMAL_BLOCK_TYPES = frozenset({BlockType.HERO, BlockType.FEATURE_GRID, BlockType.FOOTER})
FEATURED_PREFIX = "⭐ "
DEFAULT_TESTIMONIAL_TITLE = "What our customers say"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def hash_seed(seed: str) -> int:
    """31-multiplier rolling hash over UTF-16 code units, made non-negative."""
    h = 0
    encoded = seed.encode("utf-16-le", "surrogatepass")
    for idx in range(0, len(encoded), 2):
        code_unit = encoded[idx] | (encoded[idx + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return abs(h)


class SeededSequence:
    """Linear-congruential sequence in ``[0, 1)`` keyed by a string.

    Construct a fresh one per shuffle; instances are never shared.
    """

    def __init__(self, seed: str) -> None:
        self.state = hash_seed(seed)

    def next(self) -> float:
        self.state = (self.state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self.state / _MODULUS

    def next_int(self, lo: int, hi: int) -> int:
        return math.floor(self.next() * (hi - lo + 1)) + lo


def shuffle_preset(preset: Preset, seed: str) -> Preset:
    """Return a new preset with the non-anchor blocks permuted by *seed*."""
    sequence = SeededSequence(seed)
    hero = next((b for b in preset.blocks if b.type == BlockType.HERO), None)
    footer = next((b for b in preset.blocks if b.type == BlockType.FOOTER), None)
    middle = [b for b in preset.blocks if b.type not in ANCHOR_TYPES]

    for i in range(len(middle) - 1, 0, -1):
        j = sequence.next_int(0, i)
        middle[i], middle[j] = middle[j], middle[i]

    blocks = []
    if hero is not None:
        blocks.append(hero)
    blocks.extend(middle)
    if footer is not None:
        blocks.append(footer)
    return preset.model_copy(update={"blocks": blocks})


def _feature_testimonials(preset: Preset) -> Preset:
    blocks = []
    for block in preset.blocks:
        if isinstance(block, TestimonialBlock):
            title = block.props.title or DEFAULT_TESTIMONIAL_TITLE
            props = block.props.model_copy(update={"title": f"{FEATURED_PREFIX}{title}"})
            block = block.model_copy(update={"props": props})
        blocks.append(block)
    return preset.model_copy(update={"blocks": blocks})


def generate_layout_variant(
    preset: Preset,
    seed: str,
    variant: LayoutVariant | str = LayoutVariant.STANDARD,
) -> Preset:
    variant = LayoutVariant(variant)
    shuffled = shuffle_preset(preset, seed)
    if variant is LayoutVariant.MINIMAL:
        blocks = [b for b in shuffled.blocks if b.type in MINIMAL_BLOCK_TYPES]
        return shuffled.model_copy(update={"blocks": blocks})
    if variant is LayoutVariant.FEATURED:
        return _feature_testimonials(shuffled)
    return shuffled


def layout_variants(preset: Preset, seed: str) -> dict[LayoutVariant, Preset]:
    """All named variants of *preset* for one seed, in declaration order."""
    return {variant: generate_layout_variant(preset, seed, variant) for variant in LayoutVariant}
