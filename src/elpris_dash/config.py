"""Engine settings with environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from .domain import DEFAULT_HOURS_SHOWN, Margins

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class ChartSettings:
    # pixels reserved above the max and below the min price
    bound_padding: float = 50.0
    # one margin for both pointer clamping and min/max label placement
    clamp_margin: float = 30.0
    min_price_span: float = 1.0
    tick_interval_seconds: float = 1.0
    timezone: str = "Europe/Copenhagen"
    num_hours_shown: int = DEFAULT_HOURS_SHOWN
    margins: Margins = field(default_factory=Margins)
    data_csv: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ChartSettings":
        """Build settings, letting ELPRIS_* environment variables override defaults."""
        settings = cls()
        settings.timezone = os.getenv("ELPRIS_TIMEZONE", settings.timezone)
        settings.clamp_margin = _env_number("ELPRIS_CLAMP_MARGIN", float, settings.clamp_margin)
        settings.bound_padding = _env_number("ELPRIS_BOUND_PADDING", float, settings.bound_padding)
        settings.tick_interval_seconds = _env_number("ELPRIS_TICK_SECONDS", float, settings.tick_interval_seconds, positive=True)
        settings.num_hours_shown = _env_number("ELPRIS_HOURS_SHOWN", int, settings.num_hours_shown, positive=True)
        settings.data_csv = os.getenv("ELPRIS_DATA_CSV") or None
        return settings


def _env_number(name: str, caster: Callable[[str], T], default: T, positive: bool = False) -> T:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = caster(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a valid number, using {default}")
        return default
    if positive and value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be positive, using {default}")
        return default
    return value
