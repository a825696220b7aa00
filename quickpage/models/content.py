"""Content model: the brand and copy data a preview is rendered from."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_FEATURES = 6
MAX_FAQ = 5
MAX_TESTIMONIALS = 3

DEFAULT_BRAND_NAME = "Your Brand"
DEFAULT_CTAS = ("Get Started", "Learn More")


class FAQEntry(BaseModel):
    """A question/answer pair."""

    model_config = ConfigDict(frozen=True)

    q: str
    a: str


class ContentModel(BaseModel):
    """Structured brand and copy data.

    Serialises with camelCase keys (``brandName``) so that the JSON form is
    the one placeholder paths and share links address.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    brand_name: str = DEFAULT_BRAND_NAME
    tagline: str = ""
    features: list[str] = Field(default_factory=list, max_length=MAX_FEATURES)
    ctas: list[str] = Field(default_factory=lambda: list(DEFAULT_CTAS))
    faq: Annotated[list[FAQEntry], Field(max_length=MAX_FAQ)] | None = None
    testimonials: Annotated[list[str], Field(max_length=MAX_TESTIMONIALS)] | None = None
    images: list[str] | None = None

    def as_tree(self) -> dict:
        """Plain JSON tree addressed by placeholder paths."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
