"""Readout text for the price header and min/max labels."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd

from ..chart.ticks import DANISH_MONTHS

PRICE_UNIT = "øre kWh"


@dataclass(frozen=True)
class Readout:
    price: int
    unit: str
    time_text: str

    @property
    def price_text(self) -> str:
        return str(self.price)


def round_price(price: float) -> int:
    """Round half up, so 12.5 reads as 13."""
    return int(math.floor(price + 0.5))


def format_time(when: pd.Timestamp, timezone: str | None = None) -> str:
    """Short da-DK style label without year, e.g. ``19. okt. 14:05``."""
    if timezone is not None and when.tzinfo is not None:
        when = when.tz_convert(timezone)
    return f"{when.day}. {DANISH_MONTHS[when.month - 1]} {when.hour:02d}:{when.minute:02d}"


def price_label(price: float) -> str:
    return f"ØRE {round_price(price)}"


def make_readout(price: float, when: pd.Timestamp, timezone: str | None = None) -> Readout:
    return Readout(price=round_price(price), unit=PRICE_UNIT, time_text=format_time(when, timezone))
