"""Price-at-time lookup against the chronological composite series."""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from ..domain import HOUR, floor_hour


def find_price(series: pd.DataFrame, when: pd.Timestamp) -> Optional[float]:
    """Return the price of the first point whose date lies in ``when``'s hour bucket.

    The bucket is ``[floor_h(when), floor_h(when) + 1h]``, inclusive at both
    ends. Returns None when no point falls inside it.
    """
    if series.empty:
        return None
    lower = floor_hour(when)
    upper = lower + HOUR
    dates = series["date"]
    hits = np.flatnonzero(((dates >= lower) & (dates <= upper)).to_numpy())
    if hits.size == 0:
        return None
    return float(series["price"].iloc[hits[0]])


def price_or_zero(series: pd.DataFrame, when: pd.Timestamp) -> float:
    price = find_price(series, when)
    return 0.0 if price is None else price
