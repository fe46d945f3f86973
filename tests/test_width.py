import pytest

from inkpad.core.bezier import Bezier
from inkpad.core.point import Point
from inkpad.core.width import WidthModulator, stroke_width


def _segment(start, end):
    return Bezier(start, start, end, end)


@pytest.mark.parametrize("min_width,max_width", [(0.5, 2.5), (1.0, 1.0), (0.1, 40.0)])
@pytest.mark.parametrize("velocity", [0.0, 0.01, 0.7, 1.0, 10.0, 1e6])
def test_stroke_width_stays_within_bounds(velocity, min_width, max_width):
    width = stroke_width(velocity, min_width, max_width)
    assert min_width <= width <= max_width


def test_stroke_width_at_rest_is_max_width():
    assert stroke_width(0.0, 0.5, 2.5) == 2.5


def test_initial_state_is_midpoint_width():
    state = WidthModulator().initial_state()
    assert state.last_velocity == 0.0
    assert state.last_width == 1.5


def test_velocity_is_smoothed_across_segments():
    modulator = WidthModulator()
    state = modulator.initial_state()

    first = modulator.calculate_curve_widths(_segment(Point(0, 0, 0), Point(10, 0, 10)), state)
    assert first.start == 1.5
    assert first.end == pytest.approx(2.5 / 1.7)
    assert state.last_velocity == pytest.approx(0.7)

    second = modulator.calculate_curve_widths(_segment(Point(10, 0, 10), Point(20, 0, 20)), state)
    assert second.start == pytest.approx(first.end)
    assert second.end == pytest.approx(2.5 / 1.91)


def test_zero_time_delta_uses_unit_velocity():
    modulator = WidthModulator(velocity_filter_weight=1.0)
    state = modulator.initial_state()
    widths = modulator.calculate_curve_widths(_segment(Point(0, 0, 5), Point(100, 0, 5)), state)
    assert widths.end == pytest.approx(2.5 / 2.0)


def test_reset_restores_initial_state():
    modulator = WidthModulator(min_width=1.0, max_width=3.0)
    state = modulator.initial_state()
    modulator.calculate_curve_widths(_segment(Point(0, 0, 0), Point(50, 0, 1)), state)
    modulator.reset(state)
    assert (state.last_velocity, state.last_width) == (0.0, 2.0)
