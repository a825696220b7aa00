"""Vertical classifier: keyword-bucket scoring of free-text ideas.

Pure and total. An upstream hint naming a known vertical wins outright;
otherwise each vertical scores one point per bucket keyword found as a
substring of the lowercased idea/persona/job text. The strictly highest
score wins, ties resolve to the earliest vertical in ``Vertical``
declaration order, and all-zero scores fall through to broader context
checks before defaulting to ``b2b_saas``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from quickpage.models.preview import Classification, ClassificationHint, ClassificationSource
from quickpage.models.vertical import Vertical

VERTICAL_KEYWORDS: dict[Vertical, tuple[str, ...]] = {
    Vertical.B2B_SAAS: (
        "software", "saas", "platform", "tool", "dashboard", "analytics", "management",
        "automation", "workflow", "productivity", "collaboration", "integration",
        "api", "cloud", "subscription", "enterprise", "business", "team", "project",
    ),
    Vertical.SINGLE_PRODUCT: (
        "product", "device", "gadget", "app", "physical", "hardware", "invention",
        "innovation", "prototype", "manufacturing", "retail", "ecommerce", "store",
    ),
    Vertical.ECOMMERCE_LITE: (
        "shop", "store", "marketplace", "selling", "products", "inventory",
        "shopping", "buy", "sell", "retail", "merchandise", "catalog",
    ),
    Vertical.LOCAL_SERVICE: (
        "service", "local", "booking", "appointment", "salon", "studio", "clinic",
        "repair", "cleaning", "maintenance", "consultation", "coaching", "training",
        "delivery", "pickup", "on-demand", "near me", "in my area",
    ),
    Vertical.COURSE: (
        "course", "learning", "education", "training", "tutorial", "lesson",
        "curriculum", "instructor", "student", "teach", "learn", "skill",
        "certification", "workshop", "masterclass", "online", "video",
    ),
    Vertical.AGENCY: (
        "agency", "creative", "design", "marketing", "advertising", "consulting",
        "portfolio", "client", "project", "brand", "strategy", "campaign",
        "studio", "freelance", "services", "solutions",
    ),
    Vertical.NEWSLETTER: (
        "newsletter", "blog", "content", "writing", "publishing", "subscriber",
        "email", "news", "updates", "insights", "trends", "analysis",
        "journalism", "media", "publication", "magazine",
    ),
    Vertical.RESTAURANT: (
        "restaurant", "food", "dining", "cuisine", "menu", "chef", "kitchen",
        "cafe", "bar", "bistro", "delivery", "takeout", "catering", "meal",
    ),
    Vertical.REAL_ESTATE: (
        "real estate", "property", "house", "home", "apartment", "rental",
        "buying", "selling", "agent", "broker", "mortgage", "investment",
        "listing", "property management", "housing",
    ),
    Vertical.EVENT: (
        "event", "conference", "meeting", "workshop", "seminar", "ticket",
        "venue", "speaker", "attendee", "registration", "networking",
        "exhibition", "trade show", "festival", "party", "celebration",
    ),
}

# Consulted in order when no keyword matched at all.
_CONTEXT_RULES: tuple[tuple[tuple[str, ...], Vertical], ...] = (
    (("book", "course", "learn"), Vertical.COURSE),
    (("design", "creative", "agency"), Vertical.AGENCY),
    (("food", "restaurant", "dining"), Vertical.RESTAURANT),
    (("house", "property", "real estate"), Vertical.REAL_ESTATE),
    (("event", "conference", "meeting"), Vertical.EVENT),
    (("newsletter", "blog", "content"), Vertical.NEWSLETTER),
    (("service", "booking", "appointment"), Vertical.LOCAL_SERVICE),
    (("shop", "store", "sell"), Vertical.ECOMMERCE_LITE),
)

DEFAULT_VERTICAL = Vertical.B2B_SAAS

HintLike = ClassificationHint | Mapping[str, Any] | None


def _hint_label(hint: HintLike) -> str | None:
    if hint is None:
        return None
    if isinstance(hint, ClassificationHint):
        verticals: Any = hint.verticals
    else:
        verticals = hint.get("verticals")
    if not isinstance(verticals, list | tuple) or not verticals:
        return None
    first = verticals[0]
    return first if isinstance(first, str) else None


def match_vertical(label: str) -> Vertical | None:
    """Map a free-form label onto a known vertical, or None.

    Case-insensitive; spaces and underscores are interchangeable, so
    ``"Real Estate"`` and ``"real_estate"`` both match.
    """
    normalized = "_".join(label.strip().lower().replace("_", " ").split())
    for vertical in Vertical:
        if vertical.value == normalized:
            return vertical
    return None


def suggest_vertical(hint: HintLike) -> Vertical | None:
    """Return the hinted vertical if the hint names a known one."""
    label = _hint_label(hint)
    if label is None:
        return None
    return match_vertical(label)


def _combine(idea: str, persona: str | None, job: str | None) -> str:
    return " ".join(part for part in (idea, persona, job) if part).lower()


def score_verticals(text: str) -> dict[Vertical, int]:
    """Count, per vertical, how many bucket keywords occur in *text*."""
    lowered = text.lower()
    return {
        vertical: sum(1 for keyword in VERTICAL_KEYWORDS[vertical] if keyword in lowered)
        for vertical in Vertical
    }


def classify_by_context(text: str) -> Vertical | None:
    lowered = text.lower()
    for needles, vertical in _CONTEXT_RULES:
        if any(needle in lowered for needle in needles):
            return vertical
    if "product" in lowered and "software" not in lowered:
        return Vertical.SINGLE_PRODUCT
    return None


def classify_detailed(
    idea: str,
    persona: str | None = None,
    job: str | None = None,
    hint: HintLike = None,
) -> Classification:
    """Classify and report which rule decided."""
    hinted = suggest_vertical(hint)
    if hinted is not None:
        return Classification(vertical=hinted, source=ClassificationSource.HINT)

    text = _combine(idea, persona, job)
    scores = score_verticals(text)

    best = DEFAULT_VERTICAL
    best_score = 0
    for vertical in Vertical:
        if scores[vertical] > best_score:
            best, best_score = vertical, scores[vertical]

    if best_score > 0:
        return Classification(vertical=best, source=ClassificationSource.KEYWORDS, scores=scores)

    contextual = classify_by_context(text)
    if contextual is not None:
        return Classification(
            vertical=contextual, source=ClassificationSource.CONTEXT, scores=scores
        )
    return Classification(
        vertical=DEFAULT_VERTICAL, source=ClassificationSource.DEFAULT, scores=scores
    )


def classify(
    idea: str,
    persona: str | None = None,
    job: str | None = None,
    hint: HintLike = None,
) -> Vertical:
    """Pick the vertical for an idea. Never fails."""
    return classify_detailed(idea, persona, job, hint).vertical
