"""Provider protocol for fetching hourly tariff data."""

from __future__ import annotations

from typing import Protocol

import pandas as pd


class TariffProvider(Protocol):
    """Abstraction for tariff data sources."""

    def fetch_tariffs(self) -> pd.DataFrame:
        """Fetch hourly tariff records in canonical form, newest first."""
        raise NotImplementedError
