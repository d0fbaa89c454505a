"""Chronological ordering and trailing-window selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import pandas as pd

from ..domain import CompositeDataPoint, TimeWindow
from ..utils import EmptySeriesError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class WindowSelection:
    chronological: pd.DataFrame
    visible: pd.DataFrame
    num_hours_shown: int

    @property
    def min_date(self) -> pd.Timestamp:
        return self.visible["date"].iloc[0]

    @property
    def max_date(self) -> pd.Timestamp:
        return self.visible["date"].iloc[-1]


def to_chronological(series: pd.DataFrame) -> pd.DataFrame:
    """Order a composite series oldest-first (stable for equal dates)."""
    return series.sort_values("date", kind="mergesort").reset_index(drop=True)


def select_window(series: pd.DataFrame, num_hours_shown: int) -> WindowSelection:
    """Select the trailing ``num_hours_shown`` points of ``series``.

    ``series`` may arrive in any order; the feed normally delivers it newest
    first. When fewer points exist than requested, all of them are shown.
    """
    window = TimeWindow(int(num_hours_shown))
    if series.empty:
        raise EmptySeriesError("Cannot select a window from an empty price series")

    chronological = to_chronological(series)
    if window.num_hours_shown > len(chronological):
        logger.info(
            f"Requested {window.num_hours_shown}h but only {len(chronological)} points available; showing all"
        )
    visible = chronological.tail(window.num_hours_shown).reset_index(drop=True)
    return WindowSelection(chronological=chronological, visible=visible, num_hours_shown=window.num_hours_shown)


def price_extrema(visible: pd.DataFrame) -> tuple[CompositeDataPoint, CompositeDataPoint]:
    """Return the (min, max) price points of the visible window.

    Ties resolve to the leftmost point.
    """
    if visible.empty:
        raise EmptySeriesError("Cannot take price extrema of an empty window")

    dates = visible["date"].tolist()
    prices = visible["price"].tolist()
    lo = hi = 0
    for i in range(1, len(prices)):
        if prices[i] < prices[lo]:
            lo = i
        if prices[i] > prices[hi]:
            hi = i
    return (
        CompositeDataPoint(date=dates[lo], price=float(prices[lo])),
        CompositeDataPoint(date=dates[hi], price=float(prices[hi])),
    )
