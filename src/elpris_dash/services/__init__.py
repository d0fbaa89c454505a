"""Service layer entry points."""

from .engine import ChartEngine, ChartFrame, Label, RenderInstructions, compute_frame
from .tariff_service import get_tariffs, provider_from_settings

__all__ = [
    "ChartEngine",
    "ChartFrame",
    "Label",
    "RenderInstructions",
    "compute_frame",
    "get_tariffs",
    "provider_from_settings",
]
