"""
StrokeBuilder: sliding window of raw samples → Bézier segments

각 gesture마다 최대 4개의 점을 갖는 window를 유지하고,
새 점이 들어올 때마다 최대 하나의 segment를 만든다.
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from .bezier import Bezier, calculate_curve_control_points
from .point import Point
from .width import WidthModulator, WidthState

logger = logging.getLogger(__name__)

WINDOW_SIZE = 4


@dataclass
class GestureContext:
    """
    Transient state of the gesture in progress

    Owned by one gesture and reset when the next one begins.
    """
    window: Deque[Point]
    width_state: WidthState

    def __len__(self) -> int:
        return len(self.window)


@dataclass
class CurveSegment:
    """A segment ready to draw"""
    curve: Bezier
    start_width: float
    end_width: float


class StrokeBuilder:
    """
    Turns samples into segments

    Window [p0, p1, p2, p3] → Bezier(p1, c2(p0,p1,p2), c1(p1,p2,p3), p2)
    """

    def __init__(self, width_modulator: WidthModulator):
        self.width_modulator = width_modulator

    def new_context(self) -> GestureContext:
        """Fresh context for a gesture"""
        return GestureContext(window=deque(), width_state=self.width_modulator.initial_state())

    def begin(self, context: GestureContext):
        """Reset a context at gesture start"""
        context.window.clear()
        self.width_modulator.reset(context.width_state)

    def add_point(self, context: GestureContext, point: Point) -> Optional[CurveSegment]:
        """
        Add a sample to the window

        Args:
            context: Gesture context (window은 in-place 수정)
            point: New sample

        Returns:
            CurveSegment once the window is full, otherwise None
        """
        window = context.window
        window.append(point)

        # Prime the first segment with three points by repeating the first one
        if len(window) == 3:
            window.appendleft(window[0])

        if len(window) < WINDOW_SIZE:
            return None

        p0, p1, p2, p3 = window
        c2 = calculate_curve_control_points(p0, p1, p2).c2
        c3 = calculate_curve_control_points(p1, p2, p3).c1
        curve = Bezier(p1, c2, c3, p2)
        widths = self.width_modulator.calculate_curve_widths(curve, context.width_state)

        window.popleft()

        logger.debug(f"[StrokeBuilder] Segment {p1} → {p2}, widths {widths.start:.3f} → {widths.end:.3f}")

        return CurveSegment(curve=curve, start_width=widths.start, end_width=widths.end)

    @staticmethod
    def can_draw_curve(context: GestureContext) -> bool:
        """True once the window has ever produced a segment"""
        return len(context.window) > 2
