"""Step 4: Resolve placeholders and render each block."""

from __future__ import annotations

import structlog

from quickpage.design.renderer import render_preset
from quickpage.models.preview import PreviewState
from quickpage.steps.base import AbstractStep, StepContext, register_step

logger = structlog.get_logger()


@register_step
class RenderStep(AbstractStep):
    name = "render"
    step_number = 4

    def run(self, ctx: StepContext) -> PreviewState:
        state = ctx.state
        if state.preset is None or state.content is None:
            return state.model_copy(update={"blocks": []})

        blocks = render_preset(state.preset, state.content, state.style)
        logger.info("Preview rendered", style=state.style.value, blocks=len(blocks))
        return state.model_copy(update={"blocks": blocks})
