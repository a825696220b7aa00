"""Abstract base class for pipeline steps and step context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from quickpage.config import Settings
    from quickpage.models.preview import PreviewState

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class StepContext:
    """Bundles everything a step needs to execute."""

    settings: Settings
    state: PreviewState
    correlation_id: str = ""


class AbstractStep(ABC):
    """Base class for all pipeline steps."""

    name: str = ""
    step_number: int = -1

    @abstractmethod
    def run(self, ctx: StepContext) -> PreviewState:
        """Execute this step. Returns the next state; never mutates ``ctx.state``."""
        ...


# Global step registry
_step_registry: dict[int, AbstractStep] = {}


def register_step(cls: type[AbstractStep]) -> type[AbstractStep]:
    """Decorator that registers a step class by its step_number."""
    instance = cls()
    if instance.step_number < 0:
        raise ValueError(f"Step {cls.__name__} must define step_number >= 0")
    if instance.step_number in _step_registry:
        existing = _step_registry[instance.step_number]
        raise ValueError(
            f"Step number {instance.step_number} already registered by {existing.__class__.__name__}"
        )
    _step_registry[instance.step_number] = instance
    logger.debug("Registered step", step_number=instance.step_number, step=instance.name)
    return cls


def get_step_registry() -> dict[int, AbstractStep]:
    """Return the global step registry (step_number -> instance)."""
    return _step_registry
