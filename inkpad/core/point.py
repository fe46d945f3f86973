"""
Point: single pointer sample

위치(x, y)와 캡처 시각(ms)을 갖는 불변 값 타입.
Velocity between two samples drives the ink width.
"""

import math
import time as _time
from typing import Any, Dict, Optional


def now_ms() -> int:
    """Current wall-clock time in integer milliseconds"""
    return int(_time.time() * 1000)


class Point:
    """
    Immutable pointer sample

    time은 None일 때만 현재 시각으로 채워진다 (replay는 기록된 시각을 그대로 전달,
    0도 유효한 기록 시각).
    """

    __slots__ = ("x", "y", "time")

    def __init__(self, x: float, y: float, time: Optional[int] = None):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "time", now_ms() if time is None else int(time))

    def __setattr__(self, name, value):
        raise AttributeError(f"Point is immutable (cannot set '{name}')")

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point"""
        return math.hypot(self.x - other.x, self.y - other.y)

    def velocity_from(self, start: "Point") -> float:
        """
        Velocity from an earlier sample to this one

        Args:
            start: Earlier sample

        Returns:
            distance / time delta, or 1.0 when both samples share a timestamp
        """
        if self.time == start.time:
            return 1.0
        return self.distance_to(start) / (self.time - start.time)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "time": self.time}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        return cls(data["x"], data["y"], data.get("time"))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (self.x, self.y, self.time) == (other.x, other.y, other.time)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.time))

    def __repr__(self) -> str:
        return f"Point(x={self.x:.2f}, y={self.y:.2f}, time={self.time})"
