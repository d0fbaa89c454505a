"""Step-curve path description for the visible window."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..domain import HOUR
from ..utils import EmptySeriesError
from .scales import ChartScales


def _fmt(value: float) -> str:
    text = f"{float(value):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def step_vertices(visible: pd.DataFrame, scales: ChartScales) -> tuple[np.ndarray, np.ndarray]:
    """Return the polyline vertices of the step curve.

    Every hour contributes its rise point and the end of its flat run, so the
    arrays hold ``2 * len(visible)`` entries.
    """
    if visible.empty:
        raise EmptySeriesError("Cannot build a step curve from an empty window")

    starts = np.asarray(scales.x(visible["date"]), dtype=float)
    ends = np.asarray(scales.x(visible["date"] + HOUR), dtype=float)
    levels = np.asarray(scales.y(visible["price"].to_numpy(dtype=float)), dtype=float)

    xs = np.empty(2 * len(visible))
    ys = np.empty(2 * len(visible))
    xs[0::2], xs[1::2] = starts, ends
    ys[0::2], ys[1::2] = levels, levels
    return xs, ys


def build_step_path(visible: pd.DataFrame, scales: ChartScales) -> str:
    """SVG path data: ``M`` to the first hour, its flat run, then ``L``/``H`` per hour.

    The first hour is drawn twice (move + line) so every hour emits the same
    ``L x y H x`` pair.
    """
    xs, ys = step_vertices(visible, scales)
    parts = ["M", _fmt(xs[0]), _fmt(ys[0]), "H", _fmt(xs[1])]
    for i in range(0, len(xs), 2):
        parts += ["L", _fmt(xs[i]), _fmt(ys[i]), "H", _fmt(xs[i + 1])]
    return " ".join(parts)
