"""elpris_dash package with UI-agnostic logic for the hourly price chart."""

from .config import ChartSettings
from .domain import (
    WINDOW_PRESETS,
    ChartDimensions,
    CompositeDataPoint,
    Margins,
    RawDataPoint,
    ToggleSet,
)

__all__ = [
    "WINDOW_PRESETS",
    "ChartDimensions",
    "ChartSettings",
    "CompositeDataPoint",
    "Margins",
    "RawDataPoint",
    "ToggleSet",
]
