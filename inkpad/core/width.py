"""
WidthModulator: velocity-driven stroke width

빠르게 그을수록 얇아지는 잉크 폭. 속도는 gesture 동안 지수 평활된다.
"""

from dataclasses import dataclass
from typing import NamedTuple

from .bezier import Bezier


@dataclass
class WidthState:
    """Per-gesture smoothing state"""
    last_velocity: float
    last_width: float


class CurveWidths(NamedTuple):
    start: float
    end: float


def stroke_width(velocity: float, min_width: float, max_width: float) -> float:
    """Width for a smoothed velocity, within [min_width, max_width] for velocity >= 0"""
    return max(max_width / (velocity + 1), min_width)


class WidthModulator:
    """
    Computes start/end widths for each emitted segment

    velocity = w · v_new + (1 - w) · v_last
    """

    def __init__(self, velocity_filter_weight: float = 0.7,
                 min_width: float = 0.5, max_width: float = 2.5):
        self.velocity_filter_weight = velocity_filter_weight
        self.min_width = min_width
        self.max_width = max_width

    def initial_state(self) -> WidthState:
        """State at gesture start"""
        return WidthState(
            last_velocity=0.0,
            last_width=(self.min_width + self.max_width) / 2,
        )

    def reset(self, state: WidthState):
        initial = self.initial_state()
        state.last_velocity = initial.last_velocity
        state.last_width = initial.last_width

    def calculate_curve_widths(self, curve: Bezier, state: WidthState) -> CurveWidths:
        """
        Widths at the segment's start and end, updating the state

        Args:
            curve: Emitted segment (its boundary points carry the sample times)
            state: Gesture width state (in-place 갱신)

        Returns:
            CurveWidths(start=previous width, end=new width)
        """
        weight = self.velocity_filter_weight
        velocity = (weight * curve.end_point.velocity_from(curve.start_point)
                    + (1 - weight) * state.last_velocity)

        new_width = stroke_width(velocity, self.min_width, self.max_width)
        widths = CurveWidths(start=state.last_width, end=new_width)

        state.last_velocity = velocity
        state.last_width = new_width

        return widths

    def __repr__(self) -> str:
        return (f"WidthModulator(weight={self.velocity_filter_weight}, "
                f"min={self.min_width}, max={self.max_width})")
