"""Coordinate scales, step path and axis ticks."""

from .scales import ChartScales, LinearScale, TimeScale, build_scales
from .step_path import build_step_path, step_vertices
from .ticks import date_ticks, price_ticks

__all__ = [
    "ChartScales",
    "LinearScale",
    "TimeScale",
    "build_scales",
    "build_step_path",
    "date_ticks",
    "price_ticks",
    "step_vertices",
]
