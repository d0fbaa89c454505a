"""Deterministic demo tariffs for running the dashboard without a feed."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..domain import floor_hour
from .normalization import normalize_tariff_frame
from .providers import TariffProvider

# Danish electricity tax in øre/kWh
ELAFGIFT = 69.7
VAT_FACTOR = 1.25


class SyntheticTariffProvider(TariffProvider):
    """Generates ``hours`` of hourly tariffs ending at the current hour plus a day-ahead tail."""

    def __init__(
        self,
        hours: int = 24 * 30,
        ahead: int = 12,
        timezone: str = "Europe/Copenhagen",
        seed: int = 7,
        end: pd.Timestamp | None = None,
    ) -> None:
        self.hours = hours
        self.ahead = ahead
        self.timezone = timezone
        self.seed = seed
        self.end = end

    def fetch_tariffs(self) -> pd.DataFrame:
        end = self.end if self.end is not None else pd.Timestamp.now(tz=self.timezone)
        last = floor_hour(end) + pd.Timedelta(hours=self.ahead)
        dates = pd.date_range(end=last, periods=self.hours, freq="h")

        rng = np.random.default_rng(self.seed)
        hour_of_day = dates.hour.to_numpy()
        daily_shape = 40 * np.sin((hour_of_day - 6) / 24 * 2 * np.pi) + 20 * (hour_of_day >= 17) * (hour_of_day <= 20)
        market = np.clip(90 + daily_shape + rng.normal(0, 15, len(dates)), -20, None)
        # grid tariff peak window 17-21
        net_tarif = np.where((hour_of_day >= 17) & (hour_of_day < 21), 59.1, 19.7)

        raw = pd.DataFrame(
            {
                "date": dates,
                "market_price": market.round(2),
                "electricity_tax": ELAFGIFT,
                "net_tarif": net_tarif,
                "vat": VAT_FACTOR,
            }
        )
        return normalize_tariff_frame(raw, self.timezone)
