"""
CurveRenderer: variable-width segment rasterisation

Segment는 폭이 보간된 원(dot)들의 하나의 path로 채워진다.
"""

import logging
import math
from typing import List, Tuple

import numpy as np

from .bezier import Bezier
from .canvas import Surface
from .point import Point

logger = logging.getLogger(__name__)

Dot = Tuple[float, float, float]


class CurveRenderer:
    """
    Draws segments and single-point dots onto a surface

    Position uses the cubic blend; width grows with t³ toward the segment's end.
    """

    def __init__(self, surface: Surface):
        self.surface = surface

    def draw_curve(self, curve: Bezier, start_width: float, end_width: float) -> List[Dot]:
        """
        Draw one segment

        Args:
            curve: Segment to draw
            start_width: Dot radius at t = 0
            end_width: Dot radius approached at t = 1

        Returns:
            Drawn dots [(x, y, width), ...] - 짧은 segment는 빈 리스트
        """
        width_delta = end_width - start_width
        draw_steps = math.floor(curve.length())

        dots: List[Dot] = []
        if draw_steps > 0:
            t = np.arange(draw_steps) / draw_steps
            xs, ys = curve.evaluate(t)
            widths = start_width + t * t * t * width_delta
            dots = [(float(x), float(y), float(w)) for x, y, w in zip(xs, ys, widths)]

        self.surface.begin_path()
        for x, y, width in dots:
            self._draw_point(x, y, width)
        self.surface.close_path()
        self.surface.fill()

        return dots

    def draw_dot(self, point: Point, size: float) -> List[Dot]:
        """Draw a single-point stroke as one filled circle"""
        self.surface.begin_path()
        self._draw_point(point.x, point.y, size)
        self.surface.close_path()
        self.surface.fill()

        logger.debug(f"[Renderer] Dot at ({point.x:.1f}, {point.y:.1f}) r={size:.2f}")
        return [(point.x, point.y, size)]

    def _draw_point(self, x: float, y: float, size: float):
        self.surface.move_to(x, y)
        self.surface.draw_circle(x, y, size)
