"""Normalize tariff feeds into a canonical schema."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, is_dataclass
from typing import Any

import pandas as pd

from ..domain import RAW_COLUMNS, RawDataPoint

# Column spellings seen in upstream feeds
RENAME_MAP = {
    "Date": "date",
    "HourDK": "date",
    "HourUTC": "date",
    "marketPrice": "market_price",
    "SpotPriceDKK": "market_price",
    "electricityTax": "electricity_tax",
    "elafgift": "electricity_tax",
    "netTarif": "net_tarif",
    "net_tariff": "net_tarif",
    "VAT": "vat",
    "moms": "vat",
}


def empty_tariff_frame() -> pd.DataFrame:
    """Return an empty canonical frame."""
    return pd.DataFrame(columns=RAW_COLUMNS)


def records_to_frame(records: Iterable[RawDataPoint | Mapping[str, Any]], timezone: str) -> pd.DataFrame:
    """Build a canonical frame from ``RawDataPoint`` objects or plain dicts."""
    rows = [asdict(rec) if is_dataclass(rec) else dict(rec) for rec in records]
    if not rows:
        return empty_tariff_frame()
    return normalize_tariff_frame(pd.DataFrame(rows), timezone)


def normalize_tariff_frame(raw: pd.DataFrame, timezone: str) -> pd.DataFrame:
    """Rename columns, localise dates and order the frame newest-first.

    Naive timestamps are interpreted in ``timezone``; aware ones are converted
    to it. Raises ``KeyError`` if a canonical column cannot be found.
    """
    if raw is None or raw.empty:
        return empty_tariff_frame()

    working = raw.rename(columns=RENAME_MAP)
    missing = [col for col in RAW_COLUMNS if col not in working.columns]
    if missing:
        raise KeyError(f"Tariff feed is missing columns: {', '.join(missing)}")

    working = working[RAW_COLUMNS].copy()
    working["date"] = _localize_dates(working["date"], timezone)

    for col in RAW_COLUMNS[1:]:
        working[col] = pd.to_numeric(working[col], errors="coerce").astype(float)

    return working.sort_values("date", ascending=False, kind="mergesort").reset_index(drop=True)


def frame_to_records(frame: pd.DataFrame) -> list[RawDataPoint]:
    return [RawDataPoint(**row) for row in frame[RAW_COLUMNS].to_dict("records")]


def _localize_dates(values: pd.Series, timezone: str) -> pd.Series:
    try:
        dates = pd.to_datetime(values)
    except (TypeError, ValueError):
        dates = None
    if dates is None or not pd.api.types.is_datetime64_any_dtype(dates):
        # mixed UTC offsets (DST transitions) only parse as UTC
        dates = pd.to_datetime(values, utc=True)
    if dates.dt.tz is None:
        return dates.dt.tz_localize(timezone, ambiguous=False, nonexistent="shift_forward")
    return dates.dt.tz_convert(timezone)
