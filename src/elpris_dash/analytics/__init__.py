"""Pure price-series computations."""

from .compositor import compose_prices, composite_points
from .lookup import find_price, price_or_zero
from .window import WindowSelection, price_extrema, select_window, to_chronological

__all__ = [
    "WindowSelection",
    "compose_prices",
    "composite_points",
    "find_price",
    "price_extrema",
    "price_or_zero",
    "select_window",
    "to_chronological",
]
