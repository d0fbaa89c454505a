"""Data access layer."""

from .csv_provider import CsvTariffProvider
from .normalization import normalize_tariff_frame, records_to_frame
from .providers import TariffProvider
from .synthetic_provider import SyntheticTariffProvider

__all__ = [
    "CsvTariffProvider",
    "SyntheticTariffProvider",
    "TariffProvider",
    "normalize_tariff_frame",
    "records_to_frame",
]
