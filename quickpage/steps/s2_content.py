"""Step 2: Seed the content model from the idea text."""

from __future__ import annotations

import structlog

from quickpage.design.extractor import seed_content
from quickpage.models.preview import PreviewState
from quickpage.steps.base import AbstractStep, StepContext, register_step

logger = structlog.get_logger()


@register_step
class ContentStep(AbstractStep):
    name = "content"
    step_number = 2

    def run(self, ctx: StepContext) -> PreviewState:
        content = seed_content(ctx.state.request.idea)
        logger.info("Content seeded", brand_name=content.brand_name, features=len(content.features))
        return ctx.state.model_copy(update={"content": content})
