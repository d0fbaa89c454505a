"""Service helpers that UI layers call."""

from __future__ import annotations

import pandas as pd

from ..config import ChartSettings
from ..data import CsvTariffProvider, SyntheticTariffProvider, TariffProvider
from ..utils import DataRetrievalError


def provider_from_settings(settings: ChartSettings) -> TariffProvider:
    """CSV provider when ``data_csv`` is configured, otherwise demo tariffs."""
    if settings.data_csv:
        return CsvTariffProvider(settings.data_csv, timezone=settings.timezone)
    return SyntheticTariffProvider(timezone=settings.timezone)


def get_tariffs(provider: TariffProvider) -> pd.DataFrame:
    """Fetch canonical hourly tariffs, refusing an empty feed."""
    try:
        tariffs = provider.fetch_tariffs()
    except Exception as err:
        if isinstance(err, DataRetrievalError):
            raise
        raise DataRetrievalError(f"Failed to fetch tariffs: {err}") from err

    if tariffs.empty:
        raise DataRetrievalError("Tariff provider returned no rows")
    return tariffs
