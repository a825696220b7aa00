"""Classification and preview generation endpoints."""

from __future__ import annotations

import structlog
from fastapi import APIRouter

from quickpage.api.deps import CacheDep, RunnerDep
from quickpage.api.schemas import (
    ClassifyRequest,
    ClassifyResponse,
    HydrateRequest,
    PreviewResponse,
    ReclassifyRequest,
)
from quickpage.design.classifier import classify_detailed
from quickpage.models.preview import PreviewRequest

logger = structlog.get_logger()

router = APIRouter(tags=["previews"])


@router.post("/classify", response_model=ClassifyResponse)
def classify_idea(body: ClassifyRequest) -> ClassifyResponse:
    result = classify_detailed(body.idea, body.persona, body.job, body.hint)
    return ClassifyResponse(
        vertical=result.vertical,
        source=result.source.value,
        scores={vertical.value: score for vertical, score in result.scores.items()},
    )


@router.post("/previews", response_model=PreviewResponse)
def create_preview(
    body: PreviewRequest,
    runner: RunnerDep,
    cache: CacheDep,
) -> PreviewResponse:
    if cache is not None:
        cached = cache.get(body)
        if cached is not None:
            return PreviewResponse(state=cached, cached=True)

    state = runner.run(body)
    if cache is not None:
        cache.set(body, state)
    return PreviewResponse(state=state)


@router.post("/previews/hydrate", response_model=PreviewResponse)
def hydrate_preview(
    body: HydrateRequest,
    runner: RunnerDep,
) -> PreviewResponse:
    state = runner.hydrate(body.state, body.document, body.kind)
    suggested = runner.suggest_reclassification(state, body.hint) if body.hint else None
    if suggested is not None:
        logger.info("Reclassification suggested", vertical=suggested.value)
    return PreviewResponse(state=state, suggested_vertical=suggested)


@router.post("/previews/reclassify", response_model=PreviewResponse)
def reclassify_preview(
    body: ReclassifyRequest,
    runner: RunnerDep,
) -> PreviewResponse:
    return PreviewResponse(state=runner.reclassify(body.state, body.vertical))
