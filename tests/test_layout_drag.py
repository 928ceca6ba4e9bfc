from simpleui.drag import SliderDrag, WindowDrag, DragState, range_fraction, snap_to_integer
from simpleui.layout import Dim2, Rect, Vec2, clamp, stack_extent, stack_offsets


def test_dim2_resolve():
    assert Dim2(1, -20, 0, 36).resolve(500, 300) == (480, 36)
    assert Dim2(0.5, -260, 0.5, -180).resolve(1280, 720) == (380, 180)
    assert Dim2.offset(10, 20).resolve(999, 999) == (10, 20)


def test_dim2_with_height_and_lerp():
    d = Dim2.offset(520, 360).with_height(0, 44)
    assert d == Dim2(0, 520, 0, 44)

    mid = Dim2(1, 0, 0, 0).lerp(Dim2(1, 0, 0, 84), 0.5)
    assert mid == Dim2(1, 0, 0, 42)


def test_stack_offsets():
    assert stack_offsets([10, 20, 30], 5) == [0, 15, 40]
    assert stack_extent([10, 20, 30], 5) == 70
    assert stack_extent([], 5) == 0


def test_clamp_inverted_range_prefers_low():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
    assert clamp(50, 0, -40) == 0


def test_rect_intersect():
    r = Rect(0, 0, 100, 100).intersect(Rect(50, 50, 100, 100))
    assert (r.x, r.y, r.w, r.h) == (50, 50, 50, 50)

    disjoint = Rect(0, 0, 10, 10).intersect(Rect(20, 20, 5, 5))
    assert disjoint.w == 0 and disjoint.h == 0


def test_snap_to_integer_rounds_half_up():
    assert snap_to_integer(2.5) == 3
    assert snap_to_integer(2.49) == 2
    assert snap_to_integer(-2.5) == -2
    assert snap_to_integer(7) == 7


def test_window_drag_keeps_offset():
    drag = WindowDrag()
    drag.begin(Vec2(500, 190), Vec2(380, 180))
    assert drag.state == DragState.DRAGGING

    pos = drag.move(Vec2(600.4, 300.6), Vec2(520, 360), Vec2(1280, 720))
    assert pos == Vec2(480, 291)


def test_window_drag_clamps_to_viewport():
    drag = WindowDrag()
    drag.begin(Vec2(10, 10), Vec2(0, 0))
    viewport = Vec2(1280, 720)
    size = Vec2(520, 360)

    assert drag.move(Vec2(-500, -500), size, viewport) == Vec2(0, 0)
    assert drag.move(Vec2(5000, 5000), size, viewport) == Vec2(760, 360)


def test_window_drag_oversized_window_pins_to_origin():
    drag = WindowDrag()
    drag.begin(Vec2(0, 0), Vec2(0, 0))
    pos = drag.move(Vec2(300, 300), Vec2(2000, 1000), Vec2(1280, 720))
    assert pos == Vec2(0, 0)


def test_window_drag_idle_does_nothing():
    drag = WindowDrag()
    assert drag.move(Vec2(100, 100), Vec2(10, 10), Vec2(1280, 720)) is None

    drag.begin(Vec2(5, 5), Vec2(0, 0))
    drag.end()
    assert drag.state == DragState.IDLE
    assert drag.offset == Vec2()
    assert drag.move(Vec2(100, 100), Vec2(10, 10), Vec2(1280, 720)) is None


def test_range_fraction():
    assert range_fraction(50, 0, 100) == 0.5
    assert range_fraction(150, 0, 100) == 1.0
    assert range_fraction(-5, 0, 100) == 0.0
    assert range_fraction(7, 3, 3) == 0.0


def test_slider_drag_fraction_beyond_track():
    drag = SliderDrag(0, 10)
    track = Rect(100, 0, 200, 12)

    assert drag.begin(Vec2(150, 5), track) == 0.25
    assert drag.move(Vec2(-1000, 5), track) == 0.0
    assert drag.move(Vec2(1000, 5), track) == 1.0
    assert drag.value_at(0.25) == 2.5

    drag.end()
    assert drag.move(Vec2(150, 5), track) is None


def test_slider_drag_degenerate_range():
    drag = SliderDrag(4, 4)
    assert drag.degenerate
    assert drag.begin(Vec2(999, 0), Rect(0, 0, 100, 10)) == 0.0
    assert drag.value_at(0.0) == 4
