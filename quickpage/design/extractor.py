"""Content extraction: seed a ContentModel from an idea, hydrate it from documents.

Seeding is keyword-rule based. Hydration line-scans a PRD or UX document for
bullet items (feature candidates), ``Label: value`` lines and headings, and,
for UX documents, an FAQ section and quoted testimonials. Hydration returns
a new model; fields change only when the document yields non-empty
evidence, and features are appended (without duplicates) then capped.
"""

from __future__ import annotations

import re

import structlog

from quickpage.models.content import (
    DEFAULT_BRAND_NAME,
    DEFAULT_CTAS,
    MAX_FAQ,
    MAX_FEATURES,
    MAX_TESTIMONIALS,
    ContentModel,
    FAQEntry,
)
from quickpage.models.vertical import DocumentKind

logger = structlog.get_logger()

_STOPWORDS = frozenset({"the", "a", "an", "for", "with", "by"})

# (keywords, tagline, seed features); first rule whose keyword occurs wins.
_SEED_RULES: tuple[tuple[tuple[str, ...], str, tuple[str, str, str]], ...] = (
    (
        ("ai", "artificial intelligence"),
        "Harness the power of AI to transform your business",
        ("AI-powered automation", "Smart analytics and insights", "Seamless integration"),
    ),
    (
        ("app", "mobile"),
        "The mobile solution you've been waiting for",
        ("Intuitive mobile interface", "Real-time synchronization", "Offline functionality"),
    ),
    (
        ("course", "learn"),
        "Master new skills with expert guidance",
        ("Expert-led instruction", "Hands-on projects", "Lifetime access"),
    ),
    (
        ("service", "booking"),
        "Professional service when you need it most",
        ("Easy online booking", "Professional service", "Satisfaction guaranteed"),
    ),
    (
        ("design", "creative"),
        "Creative solutions that make an impact",
        ("Custom creative solutions", "Strategic thinking", "End-to-end project management"),
    ),
    (
        ("food", "restaurant"),
        "Delicious food, exceptional experience",
        ("Fresh, quality ingredients", "Authentic flavors", "Warm, welcoming atmosphere"),
    ),
    (
        ("event", "conference"),
        "Unforgettable experiences that inspire",
        ("World-class speakers", "Networking opportunities", "Interactive workshops"),
    ),
    (
        ("newsletter", "blog"),
        "Insights and analysis you can trust",
        ("Weekly insights", "Exclusive content", "Expert analysis"),
    ),
    (
        ("real estate", "property"),
        "Your trusted partner in real estate",
        ("Local market expertise", "Personalized service", "Full-service support"),
    ),
    (
        ("shop", "store"),
        "Quality products, exceptional service",
        ("Curated selection", "Fast shipping", "Easy returns"),
    ),
)

DEFAULT_TAGLINE = "Innovative solutions for modern challenges"
DEFAULT_FEATURES = ("Innovative approach", "User-friendly design", "Reliable performance")

_BULLET_RE = re.compile(r"^(?:[-*•]|\d+\.)\s+")
_HEADING_RE = re.compile(r"^#+\s+(.+)$")
_BRAND_LABEL_RE = re.compile(r"^(product name|brand|name):\s*(.+)$", re.IGNORECASE)
_TAGLINE_LABEL_RE = re.compile(r"^(tagline|description|summary):\s*(.+)$", re.IGNORECASE)
_CTA_LABEL_RE = re.compile(r"^(cta|call to action|button):\s*(.+)$", re.IGNORECASE)
_FEATURES_HEADER_RE = re.compile(r"(?:key )?features:", re.IGNORECASE)
_QUESTION_RE = re.compile(r"^(?:q[:\s]|question[:\s]|\?)\s*", re.IGNORECASE)
_ANSWER_RE = re.compile(r"^(?:a[:\s]|answer[:\s])\s*", re.IGNORECASE)
_TESTIMONIAL_RE = re.compile(r"^[\"'“](.+)[\"'”]\s*[-–—]\s*(.+)$")

_FEATURE_MIN_LEN = 10
_FEATURE_MAX_LEN = 100
_FEATURES_SECTION_LOOKAHEAD = 9
_TAGLINE_MIN_LEN = 10
_TAGLINE_MAX_LEN = 200
_HEADING_MAX_LEN = 50
_TESTIMONIAL_MIN_LEN = 20

# Per-document caps on feature candidates before merging.
_CANDIDATE_CAPS = {DocumentKind.PRD: MAX_FEATURES, DocumentKind.UX: 3}


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------


def extract_brand_name(idea: str) -> str:
    words = idea.split()
    if not words:
        return DEFAULT_BRAND_NAME
    if len(words) <= 2:
        return " ".join(words)
    first = words[0]
    if len(first) > 3 and first.lower() not in _STOPWORDS:
        return " ".join(words[:2])
    return first


def _seed_rule(idea: str) -> tuple[str, tuple[str, ...]]:
    lowered = idea.lower()
    for keywords, tagline, features in _SEED_RULES:
        if any(keyword in lowered for keyword in keywords):
            return tagline, features
    return DEFAULT_TAGLINE, DEFAULT_FEATURES


def seed_content(idea: str) -> ContentModel:
    """Build the initial content model from the raw idea text."""
    tagline, features = _seed_rule(idea)
    return ContentModel(
        brand_name=extract_brand_name(idea),
        tagline=tagline,
        features=list(features[:3]),
        ctas=list(DEFAULT_CTAS),
    )


# ---------------------------------------------------------------------------
# Line scanners
# ---------------------------------------------------------------------------


def _is_feature_length(text: str) -> bool:
    return _FEATURE_MIN_LEN < len(text) < _FEATURE_MAX_LEN


def extract_feature_candidates(text: str, *, include_sections: bool = False) -> list[str]:
    """Bullet or numbered items of plausible feature length.

    With *include_sections*, plain lines following a ``Features:`` header are
    taken too, up to the next line containing a colon.
    """
    lines = [line.strip() for line in text.splitlines()]
    candidates: list[str] = []
    for idx, line in enumerate(lines):
        if _BULLET_RE.match(line):
            item = _BULLET_RE.sub("", line, count=1).strip()
            if _is_feature_length(item):
                candidates.append(item)

        if include_sections and _FEATURES_HEADER_RE.search(line):
            for follower in lines[idx + 1 : idx + 1 + _FEATURES_SECTION_LOOKAHEAD]:
                if ":" in follower:
                    break
                if follower and _is_feature_length(follower) and not _BULLET_RE.match(follower):
                    candidates.append(follower)
    return candidates


def extract_brand_name_from_document(text: str) -> str | None:
    """``Product Name:``-style label first, else the first short heading."""
    heading: str | None = None
    for raw in text.splitlines():
        line = raw.strip()
        label = _BRAND_LABEL_RE.match(line)
        if label and label.group(2).strip():
            return label.group(2).strip()
        if heading is None:
            match = _HEADING_RE.match(line)
            if match and len(match.group(1).strip()) < _HEADING_MAX_LEN:
                heading = match.group(1).strip()
    return heading


def extract_tagline_from_document(text: str) -> str | None:
    for raw in text.splitlines():
        match = _TAGLINE_LABEL_RE.match(raw.strip())
        if match:
            value = match.group(2).strip()
            if _TAGLINE_MIN_LEN < len(value) < _TAGLINE_MAX_LEN:
                return value
    return None


def extract_ctas_from_document(text: str) -> list[str]:
    ctas = []
    for raw in text.splitlines():
        match = _CTA_LABEL_RE.match(raw.strip())
        if match and match.group(2).strip():
            ctas.append(match.group(2).strip())
    return ctas


def extract_faq(text: str) -> list[FAQEntry]:
    """Collect Q/A pairs from the FAQ section of a UX document.

    A line mentioning "faq" or "questions" opens the section. Inside it,
    ``Q:``/``Question:``/``?`` lines start a question, ``A:``/``Answer:``
    lines start its answer, and colon-free lines continue the answer.
    """
    entries: list[FAQEntry] = []
    question = ""
    answer = ""
    in_faq = False

    for raw in text.splitlines():
        line = raw.strip()
        if in_faq and _QUESTION_RE.match(line):
            if question and answer:
                entries.append(FAQEntry(q=question, a=answer))
            question = _QUESTION_RE.sub("", line, count=1).strip()
            answer = ""
        elif in_faq and _ANSWER_RE.match(line):
            answer = _ANSWER_RE.sub("", line, count=1).strip()
        elif "faq" in line.lower() or "questions" in line.lower():
            in_faq = True
        elif in_faq and question and line and ":" not in line:
            answer = f"{answer} {line}" if answer else line

    if question and answer:
        entries.append(FAQEntry(q=question, a=answer))
    return entries[:MAX_FAQ]


def extract_testimonials(text: str) -> list[str]:
    quotes = []
    for raw in text.splitlines():
        match = _TESTIMONIAL_RE.match(raw.strip())
        if match and len(match.group(1)) >= _TESTIMONIAL_MIN_LEN:
            quotes.append(match.group(1))
    return quotes[:MAX_TESTIMONIALS]


# ---------------------------------------------------------------------------
# Hydration
# ---------------------------------------------------------------------------


def merge_features(existing: list[str], candidates: list[str]) -> list[str]:
    """Append candidates not already present (case-insensitive), then cap."""
    merged = list(existing)
    seen = {" ".join(feature.lower().split()) for feature in merged}
    for candidate in candidates:
        key = " ".join(candidate.lower().split())
        if key in seen:
            continue
        seen.add(key)
        merged.append(candidate)
    return merged[:MAX_FEATURES]


def hydrate_from_document(
    text: str,
    existing: ContentModel,
    kind: DocumentKind | str,
) -> ContentModel:
    """Merge what *text* reveals into a copy of *existing*."""
    kind = DocumentKind(kind)
    update: dict = {}

    candidates = extract_feature_candidates(text, include_sections=kind is DocumentKind.PRD)
    candidates = candidates[: _CANDIDATE_CAPS[kind]]
    if candidates:
        update["features"] = merge_features(existing.features, candidates)

    brand_name = extract_brand_name_from_document(text)
    if brand_name:
        update["brand_name"] = brand_name

    tagline = extract_tagline_from_document(text)
    if tagline:
        update["tagline"] = tagline

    ctas = extract_ctas_from_document(text)
    if ctas:
        update["ctas"] = ctas

    if kind is DocumentKind.UX:
        faq = extract_faq(text)
        if faq:
            update["faq"] = faq
        testimonials = extract_testimonials(text)
        if testimonials:
            update["testimonials"] = testimonials

    logger.debug(
        "Content hydrated",
        kind=kind.value,
        updated_fields=sorted(update),
        feature_candidates=len(candidates),
    )
    if not update:
        return existing
    return existing.model_copy(update=update)


def hydrate_from_prd(text: str, existing: ContentModel) -> ContentModel:
    return hydrate_from_document(text, existing, DocumentKind.PRD)


def hydrate_from_ux(text: str, existing: ContentModel) -> ContentModel:
    return hydrate_from_document(text, existing, DocumentKind.UX)
