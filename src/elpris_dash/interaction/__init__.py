"""Pointer scrubbing and the live clock."""

from .clock import LiveClock
from .pointer import BoundingBox, PointerCaptureTarget, PointerEvent, PointerScrubController, ScrubState

__all__ = [
    "BoundingBox",
    "LiveClock",
    "PointerCaptureTarget",
    "PointerEvent",
    "PointerScrubController",
    "ScrubState",
]
