"""Step 3: Pick the vertical's preset and reorder it with the layout seed."""

from __future__ import annotations

import structlog

from quickpage.design.layout import generate_layout_variant
from quickpage.design.presets import get_preset
from quickpage.models.preview import PreviewState
from quickpage.steps.base import AbstractStep, StepContext, register_step

logger = structlog.get_logger()


@register_step
class LayoutStep(AbstractStep):
    name = "layout"
    step_number = 3

    def run(self, ctx: StepContext) -> PreviewState:
        state = ctx.state
        if state.vertical is None:
            raise ValueError("Layout step requires a classified vertical")

        base = get_preset(state.vertical, state.request.preset_id)
        if base is None:
            logger.warning("No preset for vertical", vertical=state.vertical.value)
            return state.model_copy(update={"preset": None, "blocks": []})

        preset = generate_layout_variant(base, state.seed, state.layout_variant)
        logger.info(
            "Layout generated",
            preset_id=preset.id,
            layout_variant=state.layout_variant.value,
            block_types=preset.block_types,
        )
        return state.model_copy(update={"preset": preset})
