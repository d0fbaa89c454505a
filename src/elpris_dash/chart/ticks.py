"""Axis tick positions and labels."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from .scales import LinearScale, TimeScale

DANISH_MONTHS = ["jan.", "feb.", "mar.", "apr.", "maj", "jun.", "jul.", "aug.", "sep.", "okt.", "nov.", "dec."]


def date_tick_step(num_hours_shown: int) -> pd.Timedelta:
    if num_hours_shown <= 48:
        return pd.Timedelta(hours=6)
    if num_hours_shown <= 24 * 7:
        return pd.Timedelta(days=1)
    if num_hours_shown <= 24 * 30:
        return pd.Timedelta(days=7)
    return pd.Timedelta(days=30)


def _date_label(when: pd.Timestamp, step: pd.Timedelta) -> str:
    if step < pd.Timedelta(days=1):
        return f"{when.hour:02d}:00"
    return f"{when.day}. {DANISH_MONTHS[when.month - 1]}"


def date_ticks(scale: TimeScale, num_hours_shown: int) -> list[tuple[float, str]]:
    """Ticks at step-aligned times inside the scale's domain."""
    step = date_tick_step(num_hours_shown)
    begin, end = scale.domain
    # align to local midnight so labels land on round hours/days
    anchor = begin.normalize()
    offset = (begin - anchor) // step
    first = anchor + offset * step
    if first < begin:
        first += step
    ticks = []
    when = first
    while when <= end:
        ticks.append((float(scale(when)), _date_label(when, step)))
        when += step
    return ticks


def nice_step(span: float, count: int) -> float:
    raw = span / max(count, 1)
    if raw <= 0:
        return 1.0
    magnitude = 10 ** math.floor(math.log10(raw))
    for factor in (1, 2, 5, 10):
        if raw <= factor * magnitude:
            return factor * magnitude
    return 10 * magnitude


def price_ticks(scale: LinearScale, count: int = 5) -> list[tuple[float, str]]:
    """Round-number price ticks between the domain bounds."""
    lo, hi = sorted(scale.domain)
    step = nice_step(hi - lo, count)
    values = np.arange(math.ceil(lo / step) * step, hi + step / 2, step)
    return [(float(scale(v)), f"{v:g}") for v in values if lo <= v <= hi]
