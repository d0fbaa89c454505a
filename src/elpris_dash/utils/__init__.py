"""Utility helpers."""

from .errors import DataRetrievalError, EmptySeriesError
from .logging import get_logger

__all__ = ["DataRetrievalError", "EmptySeriesError", "get_logger"]
