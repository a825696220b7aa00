"""Re-exports all Pydantic models."""

from quickpage.models.blocks import (
    Block,
    BlockType,
    FAQBlock,
    FAQItem,
    FAQProps,
    FeatureGridBlock,
    FeatureGridProps,
    FeatureItem,
    FooterBlock,
    FooterLink,
    FooterLinkGroup,
    FooterProps,
    HeroBlock,
    HeroProps,
    LogoRowBlock,
    LogoRowProps,
    Preset,
    PricingBlock,
    PricingPlan,
    PricingProps,
    SocialLink,
    SplitImageBlock,
    SplitImageProps,
    TestimonialBlock,
    TestimonialItem,
    TestimonialProps,
    UnknownBlock,
)
from quickpage.models.content import ContentModel, FAQEntry
from quickpage.models.preview import (
    Classification,
    ClassificationHint,
    ClassificationSource,
    PreviewRequest,
    PreviewState,
    RenderedBlock,
)
from quickpage.models.style import StyleTokens
from quickpage.models.vertical import DocumentKind, LayoutVariant, StyleVariant, Vertical

__all__ = [
    "Block",
    "BlockType",
    "Classification",
    "ClassificationHint",
    "ClassificationSource",
    "ContentModel",
    "DocumentKind",
    "FAQBlock",
    "FAQEntry",
    "FAQItem",
    "FAQProps",
    "FeatureGridBlock",
    "FeatureGridProps",
    "FeatureItem",
    "FooterBlock",
    "FooterLink",
    "FooterLinkGroup",
    "FooterProps",
    "HeroBlock",
    "HeroProps",
    "LayoutVariant",
    "LogoRowBlock",
    "LogoRowProps",
    "Preset",
    "PreviewRequest",
    "PreviewState",
    "PricingBlock",
    "PricingPlan",
    "PricingProps",
    "RenderedBlock",
    "SocialLink",
    "SplitImageBlock",
    "SplitImageProps",
    "StyleTokens",
    "StyleVariant",
    "TestimonialBlock",
    "TestimonialItem",
    "TestimonialProps",
    "UnknownBlock",
    "Vertical",
]
