"""Pointer scrubbing: turns pointer events into a clamped highlight offset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional, Protocol

from ..domain import HighlightState

logger = logging.getLogger(__name__)

PointerKind = Literal["down", "move", "up", "cancel"]


def clamp_offset(x: float, width: float, margin: float) -> float:
    """Clamp ``x`` to ``[margin, width - margin]``; centre it when the span is too narrow."""
    lo, hi = margin, width - margin
    if hi < lo:
        return width / 2
    return max(lo, min(hi, x))


class ScrubState(str, Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class PointerEvent:
    kind: PointerKind
    client_x: float
    pointer_id: int = 1


@dataclass(frozen=True)
class BoundingBox:
    """Client-space box of the transparent touch target over the plot area."""

    left: float
    right: float

    @property
    def width(self) -> float:
        return max(0.0, self.right - self.left)

    def contains(self, client_x: float) -> bool:
        return self.left <= client_x <= self.right


class PointerCaptureTarget(Protocol):
    def set_pointer_capture(self, pointer_id: int) -> None: ...

    def release_pointer_capture(self, pointer_id: int) -> None: ...


class PointerScrubController:
    """Two-state machine (idle/dragging) that owns the highlight offset.

    All events go through :meth:`handle`; the current state decides what an
    event means. Offsets are clamped to ``[margin, width - margin]`` for both
    the initial press and subsequent moves.
    """

    def __init__(self, clamp_margin: float = 30.0, capture: Optional[PointerCaptureTarget] = None) -> None:
        self.clamp_margin = clamp_margin
        self.capture = capture
        self.state = ScrubState.IDLE
        self.highlight = HighlightState()
        self._box: Optional[BoundingBox] = None
        self._pointer_id: Optional[int] = None

    @property
    def offset(self) -> Optional[float]:
        return self.highlight.offset

    def update_geometry(self, box: BoundingBox) -> None:
        """Record the latest layout box; later events are measured against it."""
        self._box = box

    def clamp(self, local_x: float) -> float:
        width = self._box.width if self._box is not None else 0.0
        return clamp_offset(local_x, width, self.clamp_margin)

    def handle(self, event: PointerEvent) -> Optional[float]:
        """Apply ``event`` and return the resulting highlight offset."""
        if self.state is ScrubState.IDLE:
            if event.kind == "down":
                self._begin(event)
        elif event.pointer_id == self._pointer_id:
            if event.kind == "move":
                self._track(event)
            elif event.kind in ("up", "cancel"):
                self._end()
        return self.highlight.offset

    def reset(self) -> None:
        if self.state is ScrubState.DRAGGING:
            self._end()

    def _begin(self, event: PointerEvent) -> None:
        if self._box is None:
            logger.warning("Ignoring pointer-down before the plot area has been laid out")
            return
        if not self._box.contains(event.client_x):
            logger.debug(f"Ignoring pointer-down at {event.client_x} outside the plot area")
            return
        if self.capture is not None:
            self.capture.set_pointer_capture(event.pointer_id)
        self._pointer_id = event.pointer_id
        self.state = ScrubState.DRAGGING
        self._track(event)
        logger.debug(f"Scrub started at offset {self.highlight.offset}")

    def _track(self, event: PointerEvent) -> None:
        self.highlight.offset = self.clamp(event.client_x - self._box.left)

    def _end(self) -> None:
        if self.capture is not None and self._pointer_id is not None:
            self.capture.release_pointer_capture(self._pointer_id)
        self._pointer_id = None
        self.state = ScrubState.IDLE
        self.highlight.offset = None
        logger.debug("Scrub ended; highlight follows the live clock")
