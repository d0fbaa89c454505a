"""Wall-clock ticker used as the default query time."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

import pandas as pd

logger = logging.getLogger(__name__)


class LiveClock:
    """Re-samples the wall clock every ``interval`` seconds on a daemon thread.

    Each tick stores a fresh ``now()`` reading, never an incremented value.
    Use as a context manager or pair :meth:`start` with :meth:`stop`.
    """

    def __init__(
        self,
        interval: float = 1.0,
        timezone: str = "Europe/Copenhagen",
        now: Optional[Callable[[], pd.Timestamp]] = None,
        on_tick: Optional[Callable[[pd.Timestamp], None]] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.timezone = timezone
        self._now = now or (lambda: pd.Timestamp.now(tz=self.timezone))
        self.on_tick = on_tick
        self.current: pd.Timestamp = self._now()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> pd.Timestamp:
        self.current = self._now()
        if self.on_tick is not None:
            self.on_tick(self.current)
        return self.current

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, daemon=True, name="LiveClock")
        self._thread.start()
        logger.debug(f"Live clock started ({self.interval}s interval)")

    def stop(self) -> None:
        thread, self._thread = self._thread, None
        self._stop.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.interval * 2)
            logger.debug("Live clock stopped")

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.tick()

    def __enter__(self) -> "LiveClock":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
