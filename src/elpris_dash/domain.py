from __future__ import annotations

"""Domain models for the hourly price chart."""

from dataclasses import dataclass, field, fields
from typing import Optional

import pandas as pd

HOUR = pd.Timedelta(hours=1)

RAW_COLUMNS = ["date", "market_price", "electricity_tax", "net_tarif", "vat"]
COMPOSITE_COLUMNS = ["date", "price"]

# Window presets offered by the range selector, label -> hours shown
WINDOW_PRESETS: dict[str, int] = {
    "1Å": 24 * 30 * 12,
    "1M": 24 * 30,
    "1U": 24 * 7,
    "48T": 48,
    "36T": 36,
}

DEFAULT_HOURS_SHOWN = 48


@dataclass(slots=True, frozen=True)
class RawDataPoint:
    date: pd.Timestamp
    market_price: float
    electricity_tax: float
    net_tarif: float
    vat: float


@dataclass(slots=True, frozen=True)
class CompositeDataPoint:
    date: pd.Timestamp
    price: float


@dataclass(slots=True)
class ToggleSet:
    with_market_price: bool = True
    with_elafgift: bool = True
    with_net_tarif: bool = True
    with_vat: bool = True

    @classmethod
    def names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def none(cls) -> "ToggleSet":
        return cls(False, False, False, False)


@dataclass(slots=True, frozen=True)
class TimeWindow:
    num_hours_shown: int = DEFAULT_HOURS_SHOWN

    def __post_init__(self) -> None:
        if int(self.num_hours_shown) <= 0:
            raise ValueError(f"num_hours_shown must be positive, got {self.num_hours_shown}")


@dataclass(slots=True, frozen=True)
class Margins:
    top: float = 35
    right: float = 10
    bottom: float = 10
    left: float = 30


@dataclass(slots=True, frozen=True)
class ChartDimensions:
    """Pixel size of the chart container as reported by the layout observer."""

    width: float
    height: float
    margins: Margins = field(default_factory=Margins)

    @property
    def bounded_width(self) -> float:
        return max(0.0, self.width - self.margins.left - self.margins.right)

    @property
    def bounded_height(self) -> float:
        return max(0.0, self.height - self.margins.top - self.margins.bottom)

    @property
    def is_drawable(self) -> bool:
        return self.bounded_width > 0 and self.bounded_height > 0


@dataclass(slots=True)
class HighlightState:
    offset: Optional[float] = None

    @property
    def active(self) -> bool:
        return self.offset is not None


def floor_hour(when: pd.Timestamp) -> pd.Timestamp:
    """Start of ``when``'s hour; aware times are floored in UTC so DST fall-back hours stay unambiguous."""
    when = pd.Timestamp(when)
    if when.tzinfo is None:
        return when.floor("h")
    return when.tz_convert("UTC").floor("h").tz_convert(when.tz)
