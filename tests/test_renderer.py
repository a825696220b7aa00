"""Tests for the template renderer."""

from __future__ import annotations

from quickpage.design.layout import FEATURED_PREFIX, generate_layout_variant
from quickpage.design.presets import get_preset
from quickpage.design.renderer import render_block, render_page, render_preset
from quickpage.models.blocks import (
    FooterBlock,
    FooterProps,
    HeroBlock,
    HeroProps,
    Preset,
    UnknownBlock,
)
from quickpage.models.content import ContentModel
from quickpage.models.vertical import LayoutVariant, StyleVariant, Vertical


class TestRenderPreset:
    def test_order_and_indices(self, full_content: ContentModel):
        preset = get_preset(Vertical.B2B_SAAS)
        blocks = render_preset(preset, full_content, StyleVariant.MINIMAL)
        assert [b.type for b in blocks] == preset.block_types
        assert [b.index for b in blocks] == list(range(len(preset.blocks)))

    def test_placeholders_resolved(self, full_content: ContentModel):
        blocks = render_preset(get_preset(Vertical.B2B_SAAS), full_content, "tech")
        hero = blocks[0]
        assert hero.props["brandName"] == "Brightside"
        assert hero.props["cta"] == "Try it free"
        assert "Brightside" in hero.html
        assert all("{{" not in b.html for b in blocks)

    def test_feature_titles_from_content(self, full_content: ContentModel):
        blocks = render_preset(get_preset(Vertical.NEWSLETTER), full_content, "luxury")
        grid = next(b for b in blocks if b.type == "FeatureGrid")
        assert [f["title"] for f in grid.props["features"]] == full_content.features

    def test_faq_defaults_when_content_has_none(self):
        blocks = render_preset(get_preset(Vertical.B2B_SAAS), ContentModel(), "minimal")
        faq = next(b for b in blocks if b.type == "FAQ")
        assert faq.props["faqs"][2]["question"] == "Is it worth it?"
        assert "<details" in faq.html

    def test_html_escaped(self):
        content = ContentModel(brand_name="<script>alert(1)</script>")
        blocks = render_preset(get_preset(Vertical.AGENCY), content, "editorial")
        assert "<script>" not in blocks[0].html
        assert "&lt;script&gt;" in blocks[0].html

    def test_style_changes_classes(self, full_content: ContentModel):
        preset = get_preset(Vertical.COURSE)
        luxury = render_preset(preset, full_content, StyleVariant.LUXURY)
        tech = render_preset(preset, full_content, StyleVariant.TECH)
        assert luxury[0].props == tech[0].props
        assert luxury[0].html != tech[0].html
        assert "bg-amber-50" in luxury[0].html
        assert "bg-slate-50" in tech[0].html

    def test_idempotent(self, full_content: ContentModel):
        preset = get_preset(Vertical.EVENT)
        assert render_preset(preset, full_content, "tech") == render_preset(preset, full_content, "tech")

    def test_preset_not_mutated(self, full_content: ContentModel):
        preset = get_preset(Vertical.EVENT)
        before = preset.model_dump()
        render_preset(preset, full_content, "tech")
        assert preset.model_dump() == before

    def test_unknown_block_skipped(self, full_content: ContentModel):
        preset = Preset.model_validate(
            {
                "id": "mixed",
                "name": "Mixed",
                "blocks": [
                    {"type": "Hero", "props": {"brandName": "{{brandName}}", "tagline": "t", "cta": "c"}},
                    {"type": "Carousel", "props": {"slides": 3}},
                    {"type": "Footer", "props": {"brandName": "{{brandName}}"}},
                ],
            }
        )
        assert isinstance(preset.blocks[1], UnknownBlock)
        blocks = render_preset(preset, full_content, "minimal")
        assert [(b.type, b.index) for b in blocks] == [("Hero", 0), ("Footer", 2)]

    def test_featured_layout_title(self, full_content: ContentModel):
        preset = generate_layout_variant(get_preset(Vertical.B2B_SAAS), "s", LayoutVariant.FEATURED)
        blocks = render_preset(preset, full_content, "luxury")
        testimonial = next(b for b in blocks if b.type == "Testimonial")
        assert testimonial.props["title"].startswith(FEATURED_PREFIX)


class TestRenderBlock:
    def test_footer_copyright(self, full_content: ContentModel):
        block = FooterBlock(props=FooterProps(brand_name="{{brandName}}"))
        rendered = render_block(block, 5, full_content, StyleVariant.TECH)
        assert rendered is not None
        assert rendered.index == 5
        assert "&copy; Brightside. All rights reserved." in rendered.html

    def test_unknown_returns_none(self, full_content: ContentModel):
        block = UnknownBlock(type="Carousel")
        assert render_block(block, 0, full_content, StyleVariant.TECH) is None

    def test_props_dump_omits_none(self, full_content: ContentModel):
        block = HeroBlock(props=HeroProps(brand_name="{{brandName}}", tagline="t", cta="c"))
        rendered = render_block(block, 0, full_content, StyleVariant.TECH)
        assert "backgroundImage" not in rendered.props


class TestRenderPage:
    def test_wraps_fragments(self, full_content: ContentModel):
        blocks = render_preset(get_preset(Vertical.NEWSLETTER), full_content, "minimal")
        page = render_page(blocks)
        assert page.startswith('<div class="min-h-screen">')
        assert page.endswith("</div>")
        assert page.count("<section") + page.count("<footer") == len(blocks)

    def test_empty(self):
        assert render_page([]) == '<div class="min-h-screen">\n\n</div>'
