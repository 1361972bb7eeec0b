"""Render module for SBR calculation output display."""

from render.renderers import (
    BaseRenderer,
    BenefitSummaryRenderer,
    ExitScheduleRenderer,
    SchemeRenderer,
    RENDERER_REGISTRY,
)

__all__ = [
    'BaseRenderer',
    'BenefitSummaryRenderer',
    'ExitScheduleRenderer',
    'SchemeRenderer',
    'RENDERER_REGISTRY',
]
