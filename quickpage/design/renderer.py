"""Template renderer: resolve a preset against content and emit HTML fragments.

Each block's props are dumped to a plain JSON tree, placeholders are
substituted at every depth, the tree is validated back into the kind's
props model and handed to that kind's renderer. Output order equals preset
order; blocks of an unrecognised kind produce nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from html import escape
from typing import Any

import structlog

from quickpage.design.placeholders import substitute
from quickpage.design.styles import (
    button_class,
    card_class,
    focus_ring_class,
    get_style_tokens,
    heading_class,
)
from quickpage.models.blocks import (
    FAQBlock,
    FAQProps,
    FeatureGridBlock,
    FeatureGridProps,
    FooterBlock,
    FooterProps,
    HeroBlock,
    HeroProps,
    LogoRowBlock,
    LogoRowProps,
    Preset,
    PricingBlock,
    PricingProps,
    SplitImageBlock,
    SplitImageProps,
    TestimonialBlock,
    TestimonialProps,
)
from quickpage.models.content import ContentModel
from quickpage.models.preview import RenderedBlock
from quickpage.models.vertical import StyleVariant

logger = structlog.get_logger()


# ---------------------------------------------------------------------------
# Block-kind renderers
# ---------------------------------------------------------------------------


def _section_heading(style: StyleVariant, title: str | None, subtitle: str | None = None) -> str:
    if not title:
        return ""
    tokens = get_style_tokens(style)
    subtitle_html = (
        f'<p class="text-lg {tokens.colors.text.secondary} max-w-2xl mx-auto">{escape(subtitle)}</p>'
        if subtitle
        else ""
    )
    return (
        f'<div class="text-center mb-12">'
        f'<h2 class="{heading_class(style, 2)} mb-4">{escape(title)}</h2>{subtitle_html}</div>'
    )


def render_hero(props: HeroProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    image_html = ""
    if props.background_image:
        image_html = (
            f'<div class="mt-8"><img src="{escape(props.background_image)}" '
            f'alt="{escape(props.brand_name)}" '
            f'class="max-w-full h-auto rounded-lg shadow-lg mx-auto"></div>'
        )
    return (
        f'<section class="{tokens.colors.primary} py-16 px-4">'
        f'<div class="max-w-6xl mx-auto text-center">'
        f'<h1 class="{heading_class(style, 1)} mb-6">{escape(props.brand_name)}</h1>'
        f'<p class="text-xl {tokens.colors.text.secondary} mb-8 max-w-3xl mx-auto">'
        f"{escape(props.tagline)}</p>"
        f'<div class="flex flex-col sm:flex-row gap-4 justify-center">'
        f'<button class="{button_class(style, "lg")}">{escape(props.cta)}</button>'
        f"{image_html}</div></div></section>"
    )


def render_logo_row(props: LogoRowProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    title_html = ""
    if props.title:
        title_html = (
            f'<h2 class="{heading_class(style, 3)} text-center mb-8 {tokens.colors.text.secondary}">'
            f"{escape(props.title)}</h2>"
        )
    logos_html = "".join(
        f'<div class="{tokens.colors.text.muted} text-lg font-medium px-4 py-2 border '
        f'{tokens.colors.border} rounded-lg">{escape(logo)}</div>'
        for logo in props.logos
    )
    return (
        f'<section class="{tokens.colors.surface} py-12 px-4">'
        f'<div class="max-w-6xl mx-auto">{title_html}'
        f'<div class="flex flex-wrap justify-center items-center gap-8 opacity-60">{logos_html}</div>'
        f"</div></section>"
    )


def render_feature_grid(props: FeatureGridProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    cards = ""
    for feature in props.features:
        icon_html = ""
        if feature.icon:
            icon_html = (
                f'<div class="w-12 h-12 {tokens.colors.accent} rounded-lg flex items-center '
                f'justify-center mb-4"><span class="text-white text-xl">✨</span></div>'
            )
        cards += (
            f'<div class="{card_class(style)}"><div class="p-6">{icon_html}'
            f'<h3 class="{heading_class(style, 4)} mb-3">{escape(feature.title)}</h3>'
            f'<p class="{tokens.colors.text.secondary}">{escape(feature.description)}</p>'
            f"</div></div>"
        )
    return (
        f'<section class="{tokens.colors.background} py-16 px-4">'
        f'<div class="max-w-6xl mx-auto">{_section_heading(style, props.title, props.subtitle)}'
        f'<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-3 gap-8">{cards}</div>'
        f"</div></section>"
    )


def render_split_image(props: SplitImageProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    grid_extra = " lg:grid-flow-col-dense" if props.reverse else ""
    text_col = ' class="lg:col-start-2"' if props.reverse else ""
    image_col = ' class="lg:col-start-1"' if props.reverse else ""
    cta_html = (
        f'<button class="{button_class(style, "md")}">{escape(props.cta)}</button>' if props.cta else ""
    )
    if props.image:
        image_html = (
            f'<img src="{escape(props.image)}" alt="{escape(props.title)}" '
            f'class="w-full h-auto rounded-lg shadow-lg">'
        )
    else:
        image_html = (
            f'<div class="w-full h-64 {tokens.colors.secondary} rounded-lg flex items-center '
            f'justify-center"><span class="{tokens.colors.text.muted} text-lg">Image placeholder</span></div>'
        )
    return (
        f'<section class="{tokens.colors.surface} py-16 px-4"><div class="max-w-6xl mx-auto">'
        f'<div class="grid grid-cols-1 lg:grid-cols-2 gap-12 items-center{grid_extra}">'
        f'<div{text_col}><h2 class="{heading_class(style, 2)} mb-6">{escape(props.title)}</h2>'
        f'<p class="text-lg {tokens.colors.text.secondary} mb-8">{escape(props.description)}</p>'
        f"{cta_html}</div>"
        f"<div{image_col}>{image_html}</div>"
        f"</div></div></section>"
    )


def render_pricing(props: PricingProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    columns = min(len(props.plans), 3)
    plans_html = ""
    for plan in props.plans:
        popular_card = f" {tokens.colors.accent} text-white" if plan.popular else ""
        badge = (
            f'<div class="absolute -top-4 left-1/2 transform -translate-x-1/2">'
            f'<span class="{tokens.colors.accent} text-white px-4 py-1 rounded-full text-sm '
            f'font-medium">Most Popular</span></div>'
            if plan.popular
            else ""
        )
        price_color = "text-white" if plan.popular else tokens.colors.text.primary
        per_month = '<span class="text-lg opacity-75">per month</span>' if "/" in plan.price else ""
        check_color = "text-white" if plan.popular else tokens.colors.accent
        item_color = "text-white" if plan.popular else tokens.colors.text.secondary
        items = "".join(
            f'<li class="flex items-start"><span class="{check_color} mr-3">✓</span>'
            f'<span class="{item_color}">{escape(feature)}</span></li>'
            for feature in plan.features
        )
        button = (
            "bg-white text-amber-600 hover:bg-gray-100" if plan.popular else button_class(style, "md")
        )
        name_color = " text-white" if plan.popular else ""
        plans_html += (
            f'<div class="{card_class(style)}{popular_card} relative">{badge}<div class="p-6">'
            f'<h3 class="{heading_class(style, 3)} mb-2{name_color}">{escape(plan.name)}</h3>'
            f'<div class="{price_color} mb-6"><span class="text-4xl font-bold">'
            f"{escape(plan.price)}</span>{per_month}</div>"
            f'<ul class="space-y-3 mb-8">{items}</ul>'
            f'<button class="w-full {button}">{escape(plan.cta)}</button>'
            f"</div></div>"
        )
    return (
        f'<section class="{tokens.colors.background} py-16 px-4">'
        f'<div class="max-w-6xl mx-auto">{_section_heading(style, props.title, props.subtitle)}'
        f'<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-{columns} gap-8">{plans_html}</div>'
        f"</div></section>"
    )


def render_testimonial(props: TestimonialProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    title_html = (
        f'<h2 class="{heading_class(style, 2)} text-center mb-12">{escape(props.title)}</h2>'
        if props.title
        else ""
    )
    cards = ""
    for item in props.testimonials:
        if item.avatar:
            avatar = (
                f'<img src="{escape(item.avatar)}" alt="{escape(item.author)}" '
                f'class="w-12 h-12 rounded-full mr-4">'
            )
        else:
            avatar = (
                f'<div class="w-12 h-12 {tokens.colors.accent} rounded-full flex items-center '
                f'justify-center mr-4"><span class="text-white font-semibold">'
                f"{escape(item.author[:1])}</span></div>"
            )
        role_html = ""
        if item.role:
            company = f" at {escape(item.company)}" if item.company else ""
            role_html = f'<div class="text-sm {tokens.colors.text.muted}">{escape(item.role)}{company}</div>'
        cards += (
            f'<div class="{card_class(style)}"><div class="p-6">'
            f'<blockquote class="text-lg {tokens.colors.text.secondary} mb-6 italic">'
            f"&ldquo;{escape(item.quote)}&rdquo;</blockquote>"
            f'<div class="flex items-center">{avatar}<div>'
            f'<div class="font-semibold {tokens.colors.text.primary}">{escape(item.author)}</div>'
            f"{role_html}</div></div></div></div>"
        )
    return (
        f'<section class="{tokens.colors.surface} py-16 px-4"><div class="max-w-6xl mx-auto">'
        f'{title_html}<div class="grid grid-cols-1 md:grid-cols-2 gap-8">{cards}</div>'
        f"</div></section>"
    )


def render_faq(props: FAQProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    title_html = (
        f'<h2 class="{heading_class(style, 2)} text-center mb-12">{escape(props.title)}</h2>'
        if props.title
        else ""
    )
    items = "".join(
        f'<details class="{tokens.colors.surface} border {tokens.colors.border} rounded-lg">'
        f'<summary class="w-full px-6 py-4 text-left flex justify-between items-center '
        f'{focus_ring_class(style)}"><span class="font-medium {tokens.colors.text.primary}">'
        f"{escape(faq.question)}</span></summary>"
        f'<div class="px-6 pb-4"><p class="{tokens.colors.text.secondary}">{escape(faq.answer)}</p></div>'
        f"</details>"
        for faq in props.faqs
    )
    return (
        f'<section class="{tokens.colors.background} py-16 px-4"><div class="max-w-4xl mx-auto">'
        f'{title_html}<div class="space-y-4">{items}</div></div></section>'
    )


def render_footer(props: FooterProps, style: StyleVariant) -> str:
    tokens = get_style_tokens(style)
    link_color = f"{tokens.colors.text.secondary} hover:{tokens.colors.text.primary}"
    groups = ""
    for group in props.links:
        links = "".join(
            f'<li><a href="{escape(link.href)}" class="{link_color} text-sm transition-colors">'
            f"{escape(link.label)}</a></li>"
            for link in group.items
        )
        groups += (
            f'<div><h4 class="font-semibold {tokens.colors.text.primary} mb-4">{escape(group.title)}</h4>'
            f'<ul class="space-y-2">{links}</ul></div>'
        )
    social_html = ""
    if props.social:
        anchors = "".join(
            f'<a href="{escape(social.href)}" class="{link_color} transition-colors">'
            f"{escape(social.platform)}</a>"
            for social in props.social
        )
        social_html = (
            f'<div class="mt-8 pt-8 border-t {tokens.colors.border}">'
            f'<div class="flex justify-center space-x-6">{anchors}</div></div>'
        )
    return (
        f'<footer class="{tokens.colors.secondary} py-12 px-4"><div class="max-w-6xl mx-auto">'
        f'<div class="grid grid-cols-1 md:grid-cols-2 lg:grid-cols-4 gap-8">'
        f'<div class="lg:col-span-1"><h3 class="{heading_class(style, 3)} mb-4">'
        f"{escape(props.brand_name)}</h3>"
        f'<p class="{tokens.colors.text.secondary} text-sm">Building something amazing together.</p>'
        f"</div>{groups}</div>{social_html}"
        f'<div class="mt-8 pt-8 border-t {tokens.colors.border} text-center">'
        f'<p class="{tokens.colors.text.muted} text-sm">&copy; {escape(props.brand_name)}. '
        f"All rights reserved.</p></div></div></footer>"
    )


_RENDERERS: dict[type, Callable[[Any, StyleVariant], str]] = {
    HeroBlock: render_hero,
    LogoRowBlock: render_logo_row,
    FeatureGridBlock: render_feature_grid,
    SplitImageBlock: render_split_image,
    PricingBlock: render_pricing,
    TestimonialBlock: render_testimonial,
    FAQBlock: render_faq,
    FooterBlock: render_footer,
}


# ---------------------------------------------------------------------------
# Preset rendering
# ---------------------------------------------------------------------------


def render_block(block: Any, index: int, content: ContentModel, style: StyleVariant) -> RenderedBlock | None:
    """Resolve one block. Returns None for kinds without a renderer."""
    renderer = _RENDERERS.get(type(block))
    if renderer is None:
        logger.debug("Skipping unknown block kind", block_type=block.type, index=index)
        return None

    raw = block.props.model_dump(mode="json", by_alias=True, exclude_none=True)
    resolved = substitute(raw, content)
    props = type(block.props).model_validate(resolved)
    return RenderedBlock(
        type=block.type,
        index=index,
        props=props.model_dump(mode="json", by_alias=True, exclude_none=True),
        html=renderer(props, style),
    )


def render_preset(
    preset: Preset,
    content: ContentModel,
    style: StyleVariant | str,
) -> list[RenderedBlock]:
    """Render every block of *preset* in order. Pure and idempotent."""
    style = StyleVariant(style)
    rendered = []
    for index, block in enumerate(preset.blocks):
        result = render_block(block, index, content, style)
        if result is not None:
            rendered.append(result)
    return rendered


def render_page(blocks: list[RenderedBlock]) -> str:
    """Concatenate rendered fragments into a single page body."""
    body = "\n".join(block.html for block in blocks)
    return f'<div class="min-h-screen">\n{body}\n</div>'
