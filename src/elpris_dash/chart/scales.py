"""Affine time->x and price->y mappings for the chart's bounded area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
import pandas as pd

from ..analytics.window import WindowSelection, price_extrema
from ..config import ChartSettings
from ..domain import HOUR, ChartDimensions

Number = Union[float, np.ndarray]


@dataclass(frozen=True)
class LinearScale:
    """Linear map from ``domain`` onto ``range``; either interval may be reversed."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __call__(self, value: Number) -> Number:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            mid = (r0 + r1) / 2
            return np.full_like(np.asarray(value, dtype=float), mid) if np.ndim(value) else mid
        t = (np.asarray(value, dtype=float) - d0) / (d1 - d0)
        out = r0 + t * (r1 - r0)
        return out if np.ndim(out) else float(out)

    def invert(self, pixel: Number) -> Number:
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return np.full_like(np.asarray(pixel, dtype=float), d0) if np.ndim(pixel) else float(d0)
        t = (np.asarray(pixel, dtype=float) - r0) / (r1 - r0)
        out = d0 + t * (d1 - d0)
        return out if np.ndim(out) else float(out)


@dataclass(frozen=True)
class TimeScale:
    """Linear map from a timestamp interval onto pixels."""

    domain: tuple[pd.Timestamp, pd.Timestamp]
    range: tuple[float, float]

    # nanoseconds are measured from the domain start to keep float precision
    @property
    def _linear(self) -> LinearScale:
        start, end = self.domain
        return LinearScale((0.0, float(end.value - start.value)), self.range)

    def __call__(self, when):
        origin = self.domain[0].value
        if isinstance(when, (pd.Timestamp, np.datetime64)) or not np.ndim(when):
            return self._linear(float(pd.Timestamp(when).value - origin))
        return self._linear((pd.DatetimeIndex(when).as_unit("ns").asi8 - origin).astype(float))

    def invert(self, pixel: float) -> pd.Timestamp:
        nanos = self._linear.invert(float(pixel))
        return self.domain[0] + pd.Timedelta(int(round(nanos)), unit="ns")


@dataclass(frozen=True)
class ChartScales:
    x: TimeScale
    y: LinearScale

    @property
    def begin_date(self) -> pd.Timestamp:
        return self.x.domain[0]

    @property
    def end_date(self) -> pd.Timestamp:
        return self.x.domain[1]


def time_domain(max_date: pd.Timestamp, num_hours_shown: int) -> tuple[pd.Timestamp, pd.Timestamp]:
    """Domain covering ``num_hours_shown`` full hour buckets ending with ``max_date``'s bucket."""
    begin = max_date - (num_hours_shown - 1) * HOUR
    return begin, max_date + HOUR


def price_domain(min_price: float, max_price: float, min_span: float) -> tuple[float, float]:
    """Reversed (max, min) domain, widened around the value when the span is zero."""
    if max_price - min_price <= 0:
        half = max(min_span, 1e-9) / 2
        return max_price + half, min_price - half
    return max_price, min_price


def build_scales(selection: WindowSelection, dimensions: ChartDimensions, settings: ChartSettings) -> ChartScales:
    min_item, max_item = price_extrema(selection.visible)
    padding = settings.bound_padding

    x = TimeScale(
        domain=time_domain(selection.max_date, selection.num_hours_shown),
        range=(0.0, float(dimensions.bounded_width)),
    )
    y = LinearScale(
        domain=price_domain(min_item.price, max_item.price, settings.min_price_span),
        range=(padding, float(dimensions.bounded_height) - padding),
    )
    return ChartScales(x=x, y=y)
