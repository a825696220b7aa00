"""Page blocks: a closed tagged union over the eight section kinds.

Every block carries a ``type`` tag and a kind-specific props model whose
string fields may contain ``{{path}}`` placeholder tokens. Props serialise
with camelCase keys, matching the JSON shape of stored presets and share
payloads.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag
from pydantic.alias_generators import to_camel

from quickpage.models.vertical import Vertical


class BlockType(StrEnum):
    HERO = "Hero"
    LOGO_ROW = "LogoRow"
    FEATURE_GRID = "FeatureGrid"
    SPLIT_IMAGE = "SplitImage"
    PRICING = "Pricing"
    TESTIMONIAL = "Testimonial"
    FAQ = "FAQ"
    FOOTER = "Footer"


ANCHOR_TYPES = frozenset({BlockType.HERO, BlockType.FOOTER})


class _Props(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Props per block kind
# ---------------------------------------------------------------------------


class HeroProps(_Props):
    brand_name: str
    tagline: str
    cta: str
    background_image: str | None = None


class LogoRowProps(_Props):
    logos: list[str] = Field(default_factory=list)
    title: str | None = None


class FeatureItem(_Props):
    title: str
    description: str
    icon: str | None = None


class FeatureGridProps(_Props):
    features: list[FeatureItem] = Field(default_factory=list)
    title: str | None = None
    subtitle: str | None = None


class SplitImageProps(_Props):
    title: str
    description: str
    image: str | None = None
    reverse: bool = False
    cta: str | None = None


class PricingPlan(_Props):
    name: str
    price: str
    features: list[str] = Field(default_factory=list)
    cta: str
    popular: bool = False


class PricingProps(_Props):
    plans: list[PricingPlan] = Field(default_factory=list)
    title: str | None = None
    subtitle: str | None = None


class TestimonialItem(_Props):
    quote: str
    author: str
    role: str | None = None
    company: str | None = None
    avatar: str | None = None


class TestimonialProps(_Props):
    testimonials: list[TestimonialItem] = Field(default_factory=list)
    title: str | None = None


class FAQItem(_Props):
    question: str
    answer: str


class FAQProps(_Props):
    faqs: list[FAQItem] = Field(default_factory=list)
    title: str | None = None


class FooterLink(_Props):
    label: str
    href: str


class FooterLinkGroup(_Props):
    title: str
    items: list[FooterLink] = Field(default_factory=list)


class SocialLink(_Props):
    platform: str
    href: str


class FooterProps(_Props):
    brand_name: str
    links: list[FooterLinkGroup] = Field(default_factory=list)
    social: list[SocialLink] | None = None


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


class HeroBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Hero"] = "Hero"
    props: HeroProps


class LogoRowBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["LogoRow"] = "LogoRow"
    props: LogoRowProps


class FeatureGridBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["FeatureGrid"] = "FeatureGrid"
    props: FeatureGridProps


class SplitImageBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["SplitImage"] = "SplitImage"
    props: SplitImageProps


class PricingBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Pricing"] = "Pricing"
    props: PricingProps


class TestimonialBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Testimonial"] = "Testimonial"
    props: TestimonialProps


class FAQBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["FAQ"] = "FAQ"
    props: FAQProps


class FooterBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["Footer"] = "Footer"
    props: FooterProps


class UnknownBlock(BaseModel):
    """A block whose ``type`` tag this version does not recognise.

    Kept so that payloads written by other versions still load; the renderer
    skips it.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    props: dict[str, Any] = Field(default_factory=dict)


_KNOWN_TAGS = frozenset(t.value for t in BlockType)


def _block_tag(value: Any) -> str:
    tag = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return tag if tag in _KNOWN_TAGS else "unknown"


Block = Annotated[
    Union[
        Annotated[HeroBlock, Tag("Hero")],
        Annotated[LogoRowBlock, Tag("LogoRow")],
        Annotated[FeatureGridBlock, Tag("FeatureGrid")],
        Annotated[SplitImageBlock, Tag("SplitImage")],
        Annotated[PricingBlock, Tag("Pricing")],
        Annotated[TestimonialBlock, Tag("Testimonial")],
        Annotated[FAQBlock, Tag("FAQ")],
        Annotated[FooterBlock, Tag("Footer")],
        Annotated[UnknownBlock, Tag("unknown")],
    ],
    Discriminator(_block_tag),
]


class Preset(BaseModel):
    """A named page template: an ordered list of blocks for some verticals."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    verticals: list[Vertical] = Field(default_factory=list)
    blocks: list[Block] = Field(default_factory=list)

    @property
    def block_types(self) -> list[str]:
        return [block.type for block in self.blocks]
