import pandas as pd
import pytest

from elpris_dash.analytics import compose_prices, price_extrema, select_window
from elpris_dash.domain import ToggleSet
from elpris_dash.utils import EmptySeriesError

from conftest import make_raw, ts


def _composite(prices):
    return compose_prices(make_raw(prices), ToggleSet(with_vat=False))


def test_reorders_newest_first_input():
    selection = select_window(_composite([1, 2, 3, 4]), 2)
    assert selection.chronological["date"].is_monotonic_increasing
    assert selection.chronological["price"].tolist() == [1, 2, 3, 4]
    assert selection.visible["price"].tolist() == [3, 4]


def test_min_and_max_dates_come_from_visible_window():
    selection = select_window(_composite([1, 2, 3, 4]), 3)
    assert selection.min_date == ts("2024-01-01 01:00")
    assert selection.max_date == ts("2024-01-01 03:00")


def test_window_larger_than_series_shows_everything():
    composite = _composite(list(range(24)))
    selection = select_window(composite, 48)
    assert len(selection.visible) == 24
    assert selection.num_hours_shown == 48


def test_selection_is_idempotent():
    composite = _composite([5, 3, 8, 1, 9, 2])
    first = select_window(composite, 4)
    second = select_window(composite, 4)
    pd.testing.assert_frame_equal(first.visible, second.visible)
    pd.testing.assert_frame_equal(first.chronological, second.chronological)


def test_empty_series_is_an_error():
    empty = pd.DataFrame(columns=["date", "price"])
    with pytest.raises(EmptySeriesError):
        select_window(empty, 48)


def test_non_positive_window_is_rejected():
    with pytest.raises(ValueError):
        select_window(_composite([1, 2]), 0)


def test_extrema_ties_resolve_to_leftmost():
    selection = select_window(_composite([5, 1, 3, 1, 5]), 5)
    low, high = price_extrema(selection.visible)
    assert low.price == 1 and low.date == ts("2024-01-01 01:00")
    assert high.price == 5 and high.date == ts("2024-01-01 00:00")


def test_extrema_only_consider_visible_window():
    selection = select_window(_composite([100, 1, 5, 7, 6]), 3)
    low, high = price_extrema(selection.visible)
    assert (low.price, high.price) == (5, 7)
