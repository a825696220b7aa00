"""Enumerations shared across the design pipeline."""

from __future__ import annotations

from enum import StrEnum


class Vertical(StrEnum):
    """Business category that selects a page template.

    Declaration order is the classifier's iteration order and therefore its
    tie-break order.
    """

    B2B_SAAS = "b2b_saas"
    SINGLE_PRODUCT = "single_product"
    ECOMMERCE_LITE = "ecommerce_lite"
    LOCAL_SERVICE = "local_service"
    COURSE = "course"
    AGENCY = "agency"
    NEWSLETTER = "newsletter"
    RESTAURANT = "restaurant"
    REAL_ESTATE = "real_estate"
    EVENT = "event"


class StyleVariant(StrEnum):
    LUXURY = "luxury"
    MINIMAL = "minimal"
    TECH = "tech"
    EDITORIAL = "editorial"


class LayoutVariant(StrEnum):
    """Named post-shuffle transformations of a preset."""

    STANDARD = "standard"
    MINIMAL = "minimal"
    FEATURED = "featured"


class DocumentKind(StrEnum):
    """Upstream document types the content model can be hydrated from."""

    PRD = "prd"
    UX = "ux"
