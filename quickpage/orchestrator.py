"""Pipeline orchestrator: runs preview requests through registered steps."""

from __future__ import annotations

import time as time_mod
import uuid
from typing import TYPE_CHECKING

import structlog

from quickpage.design.classifier import HintLike, suggest_vertical
from quickpage.design.extractor import hydrate_from_document, seed_content
from quickpage.metrics import hydrations_total, step_duration_seconds, step_executions_total
from quickpage.models.preview import ClassificationSource, PreviewRequest, PreviewState
from quickpage.models.vertical import DocumentKind, Vertical
from quickpage.steps.base import StepContext, get_step_registry

if TYPE_CHECKING:
    from quickpage.config import Settings

logger = structlog.get_logger()

LAYOUT_STEP = 3
RENDER_STEP = 4


class PreviewRunner:
    """Orchestrates the execution of pipeline steps for preview requests.

    Holds only settings; every call takes and returns immutable states.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        # Ensure steps are imported and registered
        import quickpage.steps  # noqa: F401

    def initial_state(self, request: PreviewRequest) -> PreviewState:
        """Resolve request defaults against settings."""
        return PreviewState(
            request=request,
            style=request.style or self.settings.default_style,
            layout_variant=request.layout_variant or self.settings.default_layout_variant,
            seed=request.seed if request.seed is not None else request.idea,
        )

    def _run_steps(self, state: PreviewState, *, start_from: int = 1) -> PreviewState:
        # Inside an API request the middleware has already bound the caller's id.
        bound = structlog.contextvars.get_contextvars().get("correlation_id")
        correlation_id = bound or uuid.uuid4().hex[:12]
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)

        registry = get_step_registry()
        for step_num in sorted(registry):
            if step_num < start_from:
                continue
            step = registry[step_num]
            ctx = StepContext(settings=self.settings, state=state, correlation_id=correlation_id)
            logger.debug("Running step", step=step.name, step_num=step_num)

            _t0 = time_mod.monotonic()
            try:
                state = step.run(ctx)
            except Exception as exc:
                step_executions_total.labels(step_name=step.name, status="error").inc()
                logger.error("Step failed", step=step.name, step_num=step_num, error=str(exc))
                raise
            step_duration_seconds.labels(step_name=step.name).observe(time_mod.monotonic() - _t0)
            step_executions_total.labels(step_name=step.name, status="success").inc()

        return state

    def run(self, request: PreviewRequest) -> PreviewState:
        """Classify, seed, lay out and render a fresh preview."""
        return self._run_steps(self.initial_state(request))

    def hydrate(
        self,
        state: PreviewState,
        document: str,
        kind: DocumentKind | str,
    ) -> PreviewState:
        """Merge a PRD/UX document into the content and re-render.

        The layout (preset order) is kept as-is.
        """
        kind = DocumentKind(kind)
        content = state.content
        if content is None:
            content = seed_content(state.request.idea)

        hydrated = hydrate_from_document(document, content, kind)
        hydrations_total.labels(kind=kind.value).inc()
        logger.info("Document merged", kind=kind.value, brand_name=hydrated.brand_name)
        return self._run_steps(state.model_copy(update={"content": hydrated}), start_from=RENDER_STEP)

    def reclassify(self, state: PreviewState, vertical: Vertical | str) -> PreviewState:
        """Switch the preview to *vertical* and rebuild from the layout stage."""
        vertical = Vertical(vertical)
        logger.info(
            "Reclassifying preview",
            from_vertical=state.vertical.value if state.vertical else None,
            to_vertical=vertical.value,
        )
        updated = state.model_copy(
            update={"vertical": vertical, "classification_source": ClassificationSource.HINT}
        )
        return self._run_steps(updated, start_from=LAYOUT_STEP)

    def suggest_reclassification(self, state: PreviewState, hint: HintLike) -> Vertical | None:
        """Vertical suggested by *hint* when it differs from the current one."""
        suggested = suggest_vertical(hint)
        if suggested is None or suggested == state.vertical:
            return None
        return suggested
