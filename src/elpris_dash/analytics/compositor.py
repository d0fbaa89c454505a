"""Combine raw tariff components into one composite price per hour."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..domain import COMPOSITE_COLUMNS, CompositeDataPoint, ToggleSet


def compose_prices(raw: pd.DataFrame, toggles: ToggleSet) -> pd.DataFrame:
    """Return a ``date``/``price`` frame with one row per raw row, in input order.

    Disabled additive components contribute 0. VAT multiplies the summed
    components and counts as a factor of 1 when disabled.
    """
    n = len(raw)
    total = np.zeros(n, dtype=float)
    if toggles.with_market_price:
        total += raw["market_price"].to_numpy(dtype=float)
    if toggles.with_elafgift:
        total += raw["electricity_tax"].to_numpy(dtype=float)
    if toggles.with_net_tarif:
        total += raw["net_tarif"].to_numpy(dtype=float)
    if toggles.with_vat:
        total *= raw["vat"].to_numpy(dtype=float)

    return pd.DataFrame({"date": raw["date"], "price": total}, index=raw.index, columns=COMPOSITE_COLUMNS)


def composite_points(series: pd.DataFrame) -> list[CompositeDataPoint]:
    return [CompositeDataPoint(date=row.date, price=float(row.price)) for row in series.itertuples(index=False)]
