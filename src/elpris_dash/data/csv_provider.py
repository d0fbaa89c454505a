"""CSV-backed tariff provider."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from ..utils import DataRetrievalError
from .normalization import normalize_tariff_frame
from .providers import TariffProvider

logger = logging.getLogger(__name__)


class CsvTariffProvider(TariffProvider):
    """Reads hourly tariff rows from a CSV export and emits canonical frames."""

    def __init__(self, path: str | Path, timezone: str = "Europe/Copenhagen") -> None:
        self.path = Path(path)
        self.timezone = timezone

    def fetch_tariffs(self) -> pd.DataFrame:
        try:
            raw = pd.read_csv(self.path)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as err:
            raise DataRetrievalError(f"Could not read tariff CSV {self.path}: {err}") from err

        try:
            frame = normalize_tariff_frame(raw, self.timezone)
        except KeyError as err:
            raise DataRetrievalError(f"Unusable tariff CSV {self.path}: {err}") from err

        logger.info(f"Loaded {len(frame)} tariff rows from {self.path}")
        return frame
