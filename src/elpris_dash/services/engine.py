"""Chart engine: wires composition, windowing, scales, scrubbing and the clock."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Optional

import pandas as pd

from ..analytics import WindowSelection, compose_prices, price_extrema, price_or_zero, select_window
from ..chart import ChartScales, build_scales, build_step_path, date_ticks, price_ticks
from ..config import ChartSettings
from ..data.normalization import normalize_tariff_frame, records_to_frame
from ..domain import ChartDimensions, CompositeDataPoint, RawDataPoint, TimeWindow, ToggleSet
from ..interaction import BoundingBox, LiveClock, PointerCaptureTarget, PointerEvent, PointerScrubController
from ..interaction.pointer import clamp_offset
from ..utils import EmptySeriesError
from ..viz.formatting import Readout, make_readout, price_label

logger = logging.getLogger(__name__)

LABEL_SHIFT = 20.0
MARKER_RADIUS = 5.0


@dataclass(frozen=True, eq=False)
class ChartFrame:
    """Everything derived from one set of engine inputs."""

    composite: pd.DataFrame
    selection: WindowSelection
    min_item: CompositeDataPoint
    max_item: CompositeDataPoint
    dimensions: ChartDimensions
    scales: Optional[ChartScales]
    path: Optional[str]

    @property
    def drawable(self) -> bool:
        return self.scales is not None


@dataclass(frozen=True)
class Label:
    x: float
    y: float
    dy: float
    text: str


@dataclass(frozen=True)
class RenderInstructions:
    path: str
    min_label: Label
    max_label: Label
    highlight_x: float
    marker_x: float
    marker_y: float
    marker_radius: float
    bounded_width: float
    bounded_height: float
    readout: Readout
    highlighting: bool
    x_ticks: list[tuple[float, str]]
    y_ticks: list[tuple[float, str]]


def compute_frame(
    raw: pd.DataFrame,
    toggles: ToggleSet,
    num_hours_shown: int,
    dimensions: ChartDimensions,
    settings: ChartSettings,
) -> ChartFrame:
    """Pure recomputation of every derived value from the engine inputs."""
    if raw.empty:
        raise EmptySeriesError("The chart needs at least one tariff record")

    composite = compose_prices(raw, toggles)
    selection = select_window(composite, num_hours_shown)
    min_item, max_item = price_extrema(selection.visible)

    scales = path = None
    if dimensions.is_drawable:
        scales = build_scales(selection, dimensions, settings)
        path = build_step_path(selection.visible, scales)
    else:
        logger.warning(f"Drawing area is {dimensions.bounded_width}x{dimensions.bounded_height}; nothing to render")

    return ChartFrame(
        composite=composite,
        selection=selection,
        min_item=min_item,
        max_item=max_item,
        dimensions=dimensions,
        scales=scales,
        path=path,
    )


class ChartEngine:
    """Session object behind one chart view.

    Every input setter recomputes the frame synchronously. The engine owns the
    live clock; call :meth:`close` (or use it as a context manager) to release
    the timer.
    """

    def __init__(
        self,
        raw: pd.DataFrame | Iterable[RawDataPoint],
        dimensions: ChartDimensions,
        settings: Optional[ChartSettings] = None,
        toggles: Optional[ToggleSet] = None,
        num_hours_shown: Optional[int] = None,
        clock: Optional[LiveClock] = None,
        capture: Optional[PointerCaptureTarget] = None,
    ) -> None:
        self.settings = settings or ChartSettings()
        self._raw = self._as_frame(raw)
        self._toggles = toggles or ToggleSet()
        self._num_hours_shown = TimeWindow(num_hours_shown or self.settings.num_hours_shown).num_hours_shown
        self._dimensions = dimensions
        self.clock = clock or LiveClock(self.settings.tick_interval_seconds, self.settings.timezone)
        self.scrub = PointerScrubController(self.settings.clamp_margin, capture)
        self._closed = False
        self.frame = self._recompute()

    # inputs --------------------------------------------------------------
    @property
    def toggles(self) -> ToggleSet:
        return replace(self._toggles)

    @property
    def raw(self) -> pd.DataFrame:
        """Canonical newest-first tariff frame the chart is drawn from."""
        return self._raw

    @property
    def num_hours_shown(self) -> int:
        return self._num_hours_shown

    @property
    def dimensions(self) -> ChartDimensions:
        return self._dimensions

    def set_raw_series(self, raw: pd.DataFrame | Iterable[RawDataPoint]) -> ChartFrame:
        frame = self._as_frame(raw)
        if frame.empty:
            raise EmptySeriesError("The chart needs at least one tariff record")
        self._raw = frame
        return self._recompute()

    def refresh_raw_series(self, raw: pd.DataFrame | Iterable[RawDataPoint]) -> bool:
        """Swap in ``raw`` only when its content differs; returns whether it did."""
        frame = self._as_frame(raw)
        if frame.equals(self._raw):
            return False
        self.set_raw_series(frame)
        return True

    def set_toggles(self, toggles: ToggleSet) -> ChartFrame:
        self._toggles = replace(toggles)
        return self._recompute()

    def toggle(self, name: str) -> ChartFrame:
        if name not in ToggleSet.names():
            raise ValueError(f"Unknown cost component toggle: {name}")
        toggles = replace(self._toggles)
        setattr(toggles, name, not getattr(toggles, name))
        return self.set_toggles(toggles)

    def set_num_hours_shown(self, num_hours_shown: int) -> ChartFrame:
        self._num_hours_shown = TimeWindow(int(num_hours_shown)).num_hours_shown
        return self._recompute()

    def set_dimensions(self, dimensions: ChartDimensions) -> ChartFrame:
        self._dimensions = dimensions
        return self._recompute()

    # pointer and clock ---------------------------------------------------
    def update_geometry(self, box: BoundingBox) -> None:
        self.scrub.update_geometry(box)

    def handle_pointer(self, event: PointerEvent) -> Optional[float]:
        return self.scrub.handle(event)

    def tick(self) -> pd.Timestamp:
        """Sample the clock once; hosts with their own refresh loop call this instead of :meth:`start`."""
        return self.clock.tick()

    def query_time(self) -> pd.Timestamp:
        """Highlighted time while scrubbing, otherwise the live clock's time."""
        offset = self.scrub.offset
        if offset is not None and self.frame.scales is not None:
            return self.frame.scales.x.invert(offset)
        return self.clock.current

    def current_price(self) -> float:
        return price_or_zero(self.frame.selection.chronological, self.query_time())

    def readout(self) -> Readout:
        query = self.query_time()
        price = price_or_zero(self.frame.selection.chronological, query)
        return make_readout(price, query, self.settings.timezone)

    def render(self) -> Optional[RenderInstructions]:
        """Draw instructions for the current frame, or None when nothing can be drawn."""
        frame = self.frame
        scales = frame.scales
        if scales is None or frame.path is None:
            return None

        width = frame.dimensions.bounded_width
        query = self.query_time()
        offset = self.scrub.offset
        highlight_x = offset if offset is not None else float(scales.x(query))
        price = price_or_zero(frame.selection.chronological, query)

        return RenderInstructions(
            path=frame.path,
            min_label=self._label(frame.min_item, scales, width, LABEL_SHIFT),
            max_label=self._label(frame.max_item, scales, width, -LABEL_SHIFT),
            highlight_x=highlight_x,
            marker_x=highlight_x,
            marker_y=float(scales.y(price)),
            marker_radius=MARKER_RADIUS,
            bounded_width=width,
            bounded_height=frame.dimensions.bounded_height,
            readout=make_readout(price, query, self.settings.timezone),
            highlighting=offset is not None,
            x_ticks=date_ticks(scales.x, self._num_hours_shown),
            y_ticks=price_ticks(scales.y),
        )

    # lifecycle -----------------------------------------------------------
    def start(self) -> None:
        if self._closed:
            raise RuntimeError("ChartEngine has been closed")
        self.clock.start()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.scrub.reset()
        self.clock.stop()

    def __enter__(self) -> "ChartEngine":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # internals -----------------------------------------------------------
    def _as_frame(self, raw: pd.DataFrame | Iterable[RawDataPoint]) -> pd.DataFrame:
        if isinstance(raw, pd.DataFrame):
            return normalize_tariff_frame(raw, self.settings.timezone)
        return records_to_frame(raw, self.settings.timezone)

    def _recompute(self) -> ChartFrame:
        self.frame = compute_frame(self._raw, self._toggles, self._num_hours_shown, self._dimensions, self.settings)
        logger.debug(
            f"Recomputed chart: {len(self.frame.selection.visible)} of {len(self.frame.composite)} hours visible"
        )
        return self.frame

    def _label(self, item: CompositeDataPoint, scales: ChartScales, width: float, dy: float) -> Label:
        return Label(
            x=clamp_offset(float(scales.x(item.date)), width, self.settings.clamp_margin),
            y=float(scales.y(item.price)),
            dy=dy,
            text=price_label(item.price),
        )
