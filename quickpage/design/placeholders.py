"""Placeholder substitution over ``{{path}}`` tokens.

The vocabulary is fixed: only the tokens in ``PLACEHOLDER_DEFAULTS`` are
resolved, each against the camelCase JSON tree of a ContentModel. A path
that is missing, out of range or resolves to an empty string yields the
token's default literal. Any other ``{{...}}`` text is left untouched.
"""

from __future__ import annotations

import re
from typing import Any

from quickpage.models.content import ContentModel

PLACEHOLDER_DEFAULTS: dict[str, str] = {
    "brandName": "Your Brand",
    "tagline": "Your amazing tagline",
    "ctas.0": "Get Started",
    "ctas.1": "Learn More",
    "features.0": "Amazing Feature 1",
    "features.1": "Amazing Feature 2",
    "features.2": "Amazing Feature 3",
    "faq.0.q": "What is this?",
    "faq.0.a": "This is a great solution for your needs.",
    "faq.1.q": "How does it work?",
    "faq.1.a": "It works by providing excellent value.",
    "faq.2.q": "Is it worth it?",
    "faq.2.a": "Absolutely! You'll love the results.",
}

_TOKEN_RE = re.compile(r"\{\{([^{}]+)\}\}")

ContentLike = ContentModel | dict[str, Any] | None


def _tree(content: ContentLike) -> dict[str, Any]:
    if content is None:
        return {}
    if isinstance(content, ContentModel):
        return content.as_tree()
    return content


def resolve_path(tree: Any, path: str) -> Any:
    """Walk a dotted path through dicts and lists; None when it leads nowhere."""
    node = tree
    for part in path.split("."):
        if isinstance(node, dict):
            node = node.get(part)
        elif isinstance(node, list):
            if not part.isdigit() or int(part) >= len(node):
                return None
            node = node[int(part)]
        else:
            return None
        if node is None:
            return None
    return node


def _replace_in(text: str, tree: dict[str, Any]) -> str:
    def _sub(match: re.Match[str]) -> str:
        path = match.group(1)
        if path not in PLACEHOLDER_DEFAULTS:
            return match.group(0)
        value = resolve_path(tree, path)
        if isinstance(value, str) and value:
            return value
        return PLACEHOLDER_DEFAULTS[path]

    return _TOKEN_RE.sub(_sub, text)


def replace_placeholders(text: str, content: ContentLike) -> str:
    """Resolve every known token in *text* against *content*."""
    return _replace_in(text, _tree(content))


def _walk(value: Any, tree: dict[str, Any]) -> Any:
    if isinstance(value, str):
        return _replace_in(value, tree)
    if isinstance(value, list):
        return [_walk(item, tree) for item in value]
    if isinstance(value, dict):
        return {key: _walk(item, tree) for key, item in value.items()}
    return value


def substitute(value: Any, content: ContentLike) -> Any:
    """Return a copy of *value* with placeholders resolved at every depth.

    Strings are substituted, lists map elementwise, dicts recurse over their
    values and every other scalar passes through unchanged.
    """
    return _walk(value, _tree(content))
