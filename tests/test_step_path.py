import numpy as np
import pytest

from elpris_dash.analytics import compose_prices, select_window
from elpris_dash.chart import build_scales, build_step_path, step_vertices
from elpris_dash.config import ChartSettings
from elpris_dash.domain import ChartDimensions, Margins, ToggleSet

from conftest import make_raw

DIMS = ChartDimensions(width=600, height=300, margins=Margins(top=0, right=0, bottom=0, left=0))


def _build(prices, hours):
    composite = compose_prices(make_raw(prices), ToggleSet(with_vat=False))
    selection = select_window(composite, hours)
    scales = build_scales(selection, DIMS, ChartSettings())
    return selection, scales


def _tokens(path):
    return path.split()


def test_path_shape():
    selection, scales = _build([10, 20, 30, 40, 50, 60], 6)
    tokens = _tokens(build_step_path(selection.visible, scales))
    assert tokens[0] == "M"
    assert tokens[3] == "H"
    assert tokens.count("M") == 1
    assert tokens.count("L") == 6
    assert tokens.count("H") == 7


def test_path_spans_full_time_domain():
    selection, scales = _build([10, 20, 30, 40, 50, 60], 6)
    tokens = _tokens(build_step_path(selection.visible, scales))
    assert float(tokens[1]) == pytest.approx(scales.x(scales.begin_date))
    assert tokens[-2] == "H"
    assert float(tokens[-1]) == pytest.approx(scales.x(scales.end_date))


def test_first_segment_matches_first_hour():
    selection, scales = _build([10, 20, 30], 3)
    tokens = _tokens(build_step_path(selection.visible, scales))
    # "M x y H x1 L x y H x1" - first hour drawn twice
    assert tokens[1:3] == tokens[6:8]
    assert tokens[4] == tokens[9]


def test_vertices_are_continuous():
    selection, scales = _build([10, 20, 15, 40, 5], 5)
    xs, ys = step_vertices(selection.visible, scales)
    assert len(xs) == 10
    # every flat run ends where the next hour starts
    assert np.allclose(xs[1:-1:2], xs[2::2])
    # runs are horizontal
    assert np.allclose(ys[0::2], ys[1::2])


def test_rounds_coordinates():
    selection, scales = _build([10, 20, 30], 3)
    path = build_step_path(selection.visible, scales)
    for token in _tokens(path):
        if token not in ("M", "L", "H"):
            assert len(token.partition(".")[2]) <= 3
