import pytest

from elpris_dash.interaction import BoundingBox, PointerEvent, PointerScrubController, ScrubState
from elpris_dash.interaction.pointer import clamp_offset


class FakeCaptureTarget:
    def __init__(self):
        self.calls = []

    def set_pointer_capture(self, pointer_id):
        self.calls.append(("set", pointer_id))

    def release_pointer_capture(self, pointer_id):
        self.calls.append(("release", pointer_id))


def _controller(left=0.0, width=500.0, margin=30.0):
    capture = FakeCaptureTarget()
    controller = PointerScrubController(clamp_margin=margin, capture=capture)
    controller.update_geometry(BoundingBox(left=left, right=left + width))
    return controller, capture


def test_press_near_left_edge_clamps_to_margin():
    controller, _ = _controller()
    assert controller.handle(PointerEvent("down", client_x=10)) == 30
    assert controller.state is ScrubState.DRAGGING


def test_move_uses_same_clamp():
    controller, _ = _controller()
    controller.handle(PointerEvent("down", client_x=200))
    assert controller.handle(PointerEvent("move", client_x=495)) == 470
    assert controller.handle(PointerEvent("move", client_x=250)) == 250


def test_offset_is_relative_to_bounding_box():
    controller, _ = _controller(left=100)
    assert controller.handle(PointerEvent("down", client_x=350)) == 250


def test_release_returns_to_idle_and_clears_highlight():
    controller, capture = _controller()
    controller.handle(PointerEvent("down", client_x=100, pointer_id=7))
    assert controller.handle(PointerEvent("up", client_x=100, pointer_id=7)) is None
    assert controller.state is ScrubState.IDLE
    assert not controller.highlight.active
    assert capture.calls == [("set", 7), ("release", 7)]


def test_lost_capture_cancels_drag():
    controller, _ = _controller()
    controller.handle(PointerEvent("down", client_x=100))
    controller.handle(PointerEvent("cancel", client_x=0))
    assert controller.state is ScrubState.IDLE
    assert controller.offset is None


def test_second_press_while_dragging_is_ignored():
    controller, capture = _controller()
    controller.handle(PointerEvent("down", client_x=100, pointer_id=1))
    assert controller.handle(PointerEvent("down", client_x=300, pointer_id=1)) == 100
    assert controller.handle(PointerEvent("down", client_x=300, pointer_id=2)) == 100
    assert capture.calls == [("set", 1)]


def test_other_pointers_do_not_end_the_drag():
    controller, _ = _controller()
    controller.handle(PointerEvent("down", client_x=100, pointer_id=1))
    controller.handle(PointerEvent("up", client_x=100, pointer_id=2))
    controller.handle(PointerEvent("move", client_x=300, pointer_id=2))
    assert controller.state is ScrubState.DRAGGING
    assert controller.offset == 100


def test_move_and_release_while_idle_are_ignored():
    controller, capture = _controller()
    assert controller.handle(PointerEvent("move", client_x=100)) is None
    assert controller.handle(PointerEvent("up", client_x=100)) is None
    assert controller.state is ScrubState.IDLE
    assert capture.calls == []


def test_press_before_layout_is_ignored():
    controller = PointerScrubController(clamp_margin=30)
    assert controller.handle(PointerEvent("down", client_x=100)) is None
    assert controller.state is ScrubState.IDLE


def test_geometry_updates_apply_to_next_move():
    controller, _ = _controller(width=500)
    controller.handle(PointerEvent("down", client_x=400))
    controller.update_geometry(BoundingBox(left=0, right=300))
    assert controller.handle(PointerEvent("move", client_x=400)) == 270


def test_reset_ends_active_drag():
    controller, capture = _controller()
    controller.handle(PointerEvent("down", client_x=100))
    controller.reset()
    assert controller.state is ScrubState.IDLE
    assert capture.calls[-1][0] == "release"


@pytest.mark.parametrize(
    "x, width, expected",
    [(10, 500, 30), (480, 500, 470), (200, 500, 200), (5, 40, 20), (5, 0, 0)],
)
def test_clamp_offset(x, width, expected):
    assert clamp_offset(x, width, 30) == expected


def test_press_outside_box_is_ignored():
    controller, capture = _controller(left=100, width=500)
    assert controller.handle(PointerEvent("down", client_x=900)) is None
    assert controller.state is ScrubState.IDLE
    assert controller.offset is None
    assert capture.calls == []
    # a later move without a press does nothing either
    assert controller.handle(PointerEvent("move", client_x=300)) is None
    assert controller.offset is None
