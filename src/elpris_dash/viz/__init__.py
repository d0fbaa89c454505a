"""Plotly rendering of engine draw instructions."""

from .formatting import Readout, format_time, make_readout, price_label, round_price
from .price_charts import make_step_chart

__all__ = ["Readout", "format_time", "make_readout", "make_step_chart", "price_label", "round_price"]
