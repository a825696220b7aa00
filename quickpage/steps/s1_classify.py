"""Step 1: Classify the idea into a vertical."""

from __future__ import annotations

import structlog

from quickpage.design.classifier import classify_detailed
from quickpage.metrics import classifications_total
from quickpage.models.preview import PreviewState
from quickpage.steps.base import AbstractStep, StepContext, register_step

logger = structlog.get_logger()


@register_step
class ClassifyStep(AbstractStep):
    name = "classify"
    step_number = 1

    def run(self, ctx: StepContext) -> PreviewState:
        request = ctx.state.request
        result = classify_detailed(request.idea, request.persona, request.job, request.hint)
        classifications_total.labels(vertical=result.vertical.value, source=result.source.value).inc()
        logger.info(
            "Idea classified",
            vertical=result.vertical.value,
            source=result.source.value,
            top_score=max(result.scores.values(), default=0),
        )
        return ctx.state.model_copy(
            update={"vertical": result.vertical, "classification_source": result.source}
        )
