import pytest

from conftest import draw_gesture
from inkpad.core.options import SignaturePadOptions
from inkpad.core.signature_pad import OriginOffset, SignaturePad, StrokeObserver

HORIZONTAL_LINE = [(0, 0, 0), (10, 0, 10), (20, 0, 20), (30, 0, 30)]


def test_single_point_gesture_is_one_dot(pad, surface):
    surface.reset()
    draw_gesture(pad, [(5, 5, 0)])

    assert surface.circles() == [(5.0, 5.0, 1.5)]
    assert pad.segment_count == 0
    assert pad.to_data() == [[{"x": 5.0, "y": 5.0, "time": 0}]]


def test_two_point_gesture_has_no_curve(pad, surface):
    surface.reset()
    draw_gesture(pad, [(0, 0, 0), (10, 0, 10)])

    assert pad.segment_count == 0
    assert surface.circles() == [(0.0, 0.0, 1.5)]
    assert len(pad.to_data()[0]) == 2


def test_horizontal_line(pad, surface):
    surface.reset()
    draw_gesture(pad, HORIZONTAL_LINE)

    assert pad.segment_count >= 1
    circles = surface.circles()
    assert circles
    xs = [x for x, _, _ in circles]
    assert xs == sorted(xs)
    assert all(0.5 <= width <= 2.5 for _, _, width in circles)
    assert all(y == pytest.approx(0.0) for _, y, _ in circles)


def test_is_empty_and_clear(pad, surface):
    assert pad.is_empty()

    draw_gesture(pad, HORIZONTAL_LINE)
    assert not pad.is_empty()

    surface.reset()
    pad.clear()
    assert pad.is_empty()
    assert pad.to_data() == []
    names = [call[0] for call in surface.calls]
    assert names[:2] == ["clear_region", "fill_region"]


def test_gesture_ended_early_is_kept(pad):
    pad.stroke_begin(0, 0, 0)
    pad.stroke_update(4, 4, 8)
    # Pointer left the region: no stroke_end
    draw_gesture(pad, [(50, 50, 100)])

    data = pad.to_data()
    assert len(data) == 2
    assert [p["x"] for p in data[0]] == [0.0, 4.0]


def test_coordinate_transform_applies_to_every_sample(surface):
    pad = SignaturePad(surface, coordinate_transform=OriginOffset(left=100, top=50))
    draw_gesture(pad, [(105, 55, 0), (110, 60, 5)])

    assert [(p["x"], p["y"]) for p in pad.to_data()[0]] == [(5.0, 5.0), (10.0, 10.0)]


def test_option_callbacks_fire_at_gesture_boundaries(surface):
    seen = []
    options = SignaturePadOptions(
        on_begin=lambda event: seen.append(("begin", event, len(pad.to_data()[-1]))),
        on_end=lambda event: seen.append(("end", event)) or "ignored",
    )
    pad = SignaturePad(surface, options=options)

    draw_gesture(pad, [(0, 0, 0), (1, 1, 1)], event="pointer")
    assert seen == [("begin", "pointer", 1), ("end", "pointer")]


def test_observer_registration(pad):
    class Counter(StrokeObserver):
        def __init__(self):
            self.begins = 0
            self.ends = 0

        def on_stroke_begin(self, event):
            self.begins += 1

        def on_stroke_end(self, event):
            self.ends += 1

    counter = Counter()
    pad.add_observer(counter)
    draw_gesture(pad, [(0, 0, 0)])
    pad.remove_observer(counter)
    draw_gesture(pad, [(1, 1, 1)])

    assert (counter.begins, counter.ends) == (1, 1)


def test_dot_size_accepts_callable(surface):
    pad = SignaturePad(surface, options=SignaturePadOptions(dot_size=lambda: 4.0))
    surface.reset()
    draw_gesture(pad, [(3, 3, 0)])
    assert surface.circles() == [(3.0, 3.0, 4.0)]


def test_pen_colour_is_armed_at_gesture_start(surface):
    pad = SignaturePad(surface, options=SignaturePadOptions(pen_color="#ff0000"))
    surface.reset()
    pad.stroke_begin(0, 0, 0)
    assert surface.calls[0] == ("set_fill_color", (1.0, 0.0, 0.0, 1.0))


def test_fast_strokes_get_thinner(pad, surface):
    surface.reset()
    draw_gesture(pad, [(i * 50, 0, i) for i in range(8)])
    widths = [w for _, _, w in surface.circles()]
    assert widths[-1] == pytest.approx(0.5)
    assert min(widths) >= 0.5
