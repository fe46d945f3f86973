"""
Bezier: cubic Bézier segment and control-point estimation

세 개의 연속된 샘플로부터 control point 쌍을 추정하여
샘플 사이를 tangent가 연속인 cubic Bézier로 연결한다.
"""

from typing import NamedTuple

import numpy as np

from .point import Point

# Number of chords used to approximate a segment's length
LENGTH_STEPS = 10


class ControlPoints(NamedTuple):
    """Control points around a middle sample (c1 trails it, c2 leads it)"""
    c1: Point
    c2: Point


class Bezier:
    """
    Cubic Bézier curve between two window points

    start_point → control1 → control2 → end_point
    """

    def __init__(self, start_point: Point, control1: Point, control2: Point, end_point: Point):
        self.start_point = start_point
        self.control1 = control1
        self.control2 = control2
        self.end_point = end_point

    @staticmethod
    def point(t, start, c1, c2, end):
        """
        Standard cubic blend along one axis

        Works on scalars and on numpy arrays of t.
        """
        u = 1.0 - t
        return (start * u * u * u
                + 3.0 * c1 * u * u * t
                + 3.0 * c2 * u * t * t
                + end * t * t * t)

    def axes(self):
        """(xs, ys) of the four control points"""
        xs = (self.start_point.x, self.control1.x, self.control2.x, self.end_point.x)
        ys = (self.start_point.y, self.control1.y, self.control2.y, self.end_point.y)
        return xs, ys

    def evaluate(self, t):
        """
        Position at parameter t

        Args:
            t: Scalar or array in [0, 1]

        Returns:
            (x, y) - scalars or arrays matching t
        """
        xs, ys = self.axes()
        return self.point(t, *xs), self.point(t, *ys)

    def length(self) -> float:
        """
        Approximated arc length

        Sum of chords over a fixed 11-sample polyline (t = 0, 0.1, ..., 1).
        """
        t = np.arange(LENGTH_STEPS + 1) / LENGTH_STEPS
        x, y = self.evaluate(t)
        return float(np.sum(np.hypot(np.diff(x), np.diff(y))))

    def __repr__(self) -> str:
        return (f"Bezier(start={self.start_point}, c1={self.control1}, "
                f"c2={self.control2}, end={self.end_point})")


def calculate_curve_control_points(s1: Point, s2: Point, s3: Point) -> ControlPoints:
    """
    Estimate the control points around s2

    m1, m2: 구간 중점
    k: 구간 길이 비율 l2 / (l1 + l2)
    cm: m2 + k·(m1 - m2), s2로 평행이동하여 c1, c2를 얻는다

    Args:
        s1, s2, s3: Consecutive samples

    Returns:
        ControlPoints(c1, c2) - c1 ends the segment into s2, c2 starts the one out of it
    """
    dx1 = s1.x - s2.x
    dy1 = s1.y - s2.y
    dx2 = s2.x - s3.x
    dy2 = s2.y - s3.y

    m1x, m1y = (s1.x + s2.x) / 2.0, (s1.y + s2.y) / 2.0
    m2x, m2y = (s2.x + s3.x) / 2.0, (s2.y + s3.y) / 2.0

    l1 = np.hypot(dx1, dy1)
    l2 = np.hypot(dx2, dy2)

    # Coincident samples: no blend
    total = l1 + l2
    k = l2 / total if total > 0 else 0.0

    cmx = m2x + (m1x - m2x) * k
    cmy = m2y + (m1y - m2y) * k

    tx = s2.x - cmx
    ty = s2.y - cmy

    return ControlPoints(
        c1=Point(m1x + tx, m1y + ty, s2.time),
        c2=Point(m2x + tx, m2y + ty, s2.time),
    )
