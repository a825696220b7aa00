"""Shared test fixtures."""

from __future__ import annotations

import pytest

from quickpage.config import Settings
from quickpage.design.extractor import seed_content
from quickpage.models.content import ContentModel, FAQEntry
from quickpage.orchestrator import PreviewRunner

_PRD = """\
# Acme Planner

Product Name: Acme Planner
Tagline: Plan your week in five minutes flat

## Key Features:
- Drag and drop weekly calendar
- Smart reminders for every task
* Shared team boards
1. Short
CTA: Start planning
CTA: See a demo
"""

_UX = """\
# Onboarding flow

"This app saved my team hours every single week." - Dana, Ops Lead
“Setup took minutes and everyone loved it.” — Priya
"Too short" - Bob

## FAQ
Q: How long does setup take?
A: About five minutes.
Q: Can I import my calendar?
A: Yes, from Google and Outlook.
It syncs every hour.
"""


@pytest.fixture()
def sample_prd() -> str:
    return _PRD


@pytest.fixture()
def sample_ux() -> str:
    return _UX


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        redis_url="",
        share_base_url="https://pages.example.com",
        log_level="DEBUG",
        log_format="console",
        _env_file=None,
    )


@pytest.fixture()
def runner(settings: Settings) -> PreviewRunner:
    return PreviewRunner(settings)


@pytest.fixture()
def planner_content() -> ContentModel:
    return seed_content("Acme planner for busy teams")


@pytest.fixture()
def full_content() -> ContentModel:
    return ContentModel(
        brand_name="Brightside",
        tagline="Sunny software for cloudy days",
        features=["Instant setup", "Real-time sync", "Offline mode"],
        ctas=["Try it free", "Book a demo"],
        faq=[
            FAQEntry(q="Is there a free plan?", a="Yes, forever."),
            FAQEntry(q="Can I cancel anytime?", a="Of course."),
        ],
        testimonials=["Brightside made our mornings better."],
    )
