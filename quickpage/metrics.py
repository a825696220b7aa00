"""Prometheus metric definitions for the preview pipeline."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

# --- Step execution ---

step_duration_seconds = Histogram(
    "quickpage_step_duration_seconds",
    "Time spent executing a pipeline step",
    labelnames=["step_name"],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
)

step_executions_total = Counter(
    "quickpage_step_executions_total",
    "Total pipeline step executions",
    labelnames=["step_name", "status"],
)

# --- Classification ---

classifications_total = Counter(
    "quickpage_classifications_total",
    "Total vertical classifications by outcome and deciding rule",
    labelnames=["vertical", "source"],
)

# --- Hydration ---

hydrations_total = Counter(
    "quickpage_hydrations_total",
    "Total content hydrations from upstream documents",
    labelnames=["kind"],
)

# --- Preview cache ---

preview_cache_requests_total = Counter(
    "quickpage_preview_cache_requests_total",
    "Preview cache lookups by result (hit/miss/error)",
    labelnames=["result"],
)
