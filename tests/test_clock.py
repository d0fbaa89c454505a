import threading

import pandas as pd
import pytest

from elpris_dash.interaction import LiveClock


def test_tick_resamples_wall_clock():
    readings = iter(pd.date_range("2024-01-01 12:00", periods=4, freq="7s", tz="UTC"))
    clock = LiveClock(interval=1.0, now=lambda: next(readings))
    assert clock.current == pd.Timestamp("2024-01-01 12:00", tz="UTC")
    assert clock.tick() == pd.Timestamp("2024-01-01 12:00:07", tz="UTC")
    assert clock.tick() == pd.Timestamp("2024-01-01 12:00:14", tz="UTC")
    assert clock.current == pd.Timestamp("2024-01-01 12:00:14", tz="UTC")


def test_default_clock_is_timezone_aware():
    clock = LiveClock(timezone="Europe/Copenhagen")
    assert str(clock.current.tz) == "Europe/Copenhagen"


def test_runs_until_stopped():
    ticked = threading.Event()
    clock = LiveClock(interval=0.01, on_tick=lambda _: ticked.set())
    clock.start()
    try:
        assert ticked.wait(timeout=2.0)
        assert clock.running
    finally:
        clock.stop()
    assert not clock.running


def test_context_manager_releases_timer():
    with LiveClock(interval=0.01) as clock:
        assert clock.running
    assert not clock.running


def test_start_and_stop_are_idempotent():
    clock = LiveClock(interval=0.01)
    clock.start()
    thread = clock._thread
    clock.start()
    assert clock._thread is thread
    clock.stop()
    clock.stop()
    assert not clock.running


def test_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        LiveClock(interval=0)
