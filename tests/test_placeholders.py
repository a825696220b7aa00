"""Tests for {{path}} placeholder substitution."""

from __future__ import annotations

from quickpage.design.placeholders import (
    PLACEHOLDER_DEFAULTS,
    replace_placeholders,
    resolve_path,
    substitute,
)
from quickpage.models.content import ContentModel


class TestResolvePath:
    def test_nested(self):
        tree = {"faq": [{"q": "Why?", "a": "Because."}]}
        assert resolve_path(tree, "faq.0.a") == "Because."

    def test_missing(self):
        assert resolve_path({"features": ["one"]}, "features.3") is None
        assert resolve_path({}, "brandName") is None
        assert resolve_path({"brandName": "x"}, "brandName.0") is None


class TestReplacePlaceholders:
    def test_resolves_from_content(self, full_content: ContentModel):
        assert replace_placeholders("{{brandName}}: {{tagline}}", full_content) == (
            "Brightside: Sunny software for cloudy days"
        )

    def test_indexed_paths(self, full_content: ContentModel):
        text = "{{features.1}} / {{ctas.1}} / {{faq.1.q}}"
        assert replace_placeholders(text, full_content) == (
            "Real-time sync / Book a demo / Can I cancel anytime?"
        )

    def test_empty_value_falls_back(self):
        content = ContentModel(brand_name="", tagline="")
        assert replace_placeholders("{{brandName}}|{{tagline}}", content) == (
            "Your Brand|Your amazing tagline"
        )

    def test_out_of_range_falls_back(self):
        content = ContentModel(features=["Only one"])
        assert replace_placeholders("{{features.2}}", content) == "Amazing Feature 3"

    def test_missing_faq_falls_back(self):
        assert replace_placeholders("{{faq.2.a}}", ContentModel()) == (
            "Absolutely! You'll love the results."
        )

    def test_none_content_uses_defaults(self):
        for token, default in PLACEHOLDER_DEFAULTS.items():
            assert replace_placeholders(f"{{{{{token}}}}}", None) == default

    def test_unknown_tokens_left_as_is(self, full_content: ContentModel):
        text = "{{unknown}} {{features.3}} {{ brandName }}"
        assert replace_placeholders(text, full_content) == text

    def test_plain_dict_content(self):
        assert replace_placeholders("Hi {{brandName}}", {"brandName": "Dict Co"}) == "Hi Dict Co"

    def test_text_without_tokens(self, full_content: ContentModel):
        assert replace_placeholders("No tokens here", full_content) == "No tokens here"


class TestSubstitute:
    def test_nested_structures(self, full_content: ContentModel):
        value = {
            "title": "{{brandName}}",
            "items": [{"label": "{{ctas.0}}", "popular": True, "rank": 2}],
            "image": None,
        }
        assert substitute(value, full_content) == {
            "title": "Brightside",
            "items": [{"label": "Try it free", "popular": True, "rank": 2}],
            "image": None,
        }

    def test_does_not_mutate_input(self, full_content: ContentModel):
        value = {"title": "{{brandName}}"}
        substitute(value, full_content)
        assert value == {"title": "{{brandName}}"}

    def test_scalar_passthrough(self):
        assert substitute(3.5, None) == 3.5
