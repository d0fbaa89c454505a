"""Custom exceptions."""


class DataRetrievalError(Exception):
    """Raised when a provider fails to return usable tariff data."""


class EmptySeriesError(ValueError):
    """Raised when the chart is asked to window or scale an empty series."""
