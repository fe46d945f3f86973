"""
Drawing: committed point groups

한 gesture의 raw 샘플 = PointGroup, Drawing = PointGroup의 append-only 목록.
Exchange format: [[{"x": ..., "y": ..., "time": ...}, ...], ...]
"""

import json
from typing import Any, Dict, Iterable, Iterator, List

from .point import Point

PointGroup = List[Point]


class Drawing:
    """
    Ordered point groups of everything drawn since the last clear

    Groups are only appended; the whole list is replaced on clear or load.
    """

    def __init__(self, point_groups: Iterable[PointGroup] = ()):
        self.point_groups: List[PointGroup] = [list(group) for group in point_groups]

    def begin_group(self) -> PointGroup:
        """Start the group of a new gesture"""
        group: PointGroup = []
        self.point_groups.append(group)
        return group

    def append(self, point: Point):
        """Append a raw sample to the current group"""
        if not self.point_groups:
            self.begin_group()
        self.point_groups[-1].append(point)

    @property
    def current_group(self) -> PointGroup:
        return self.point_groups[-1] if self.point_groups else []

    def clear(self):
        self.point_groups = []

    def replace(self, point_groups: Iterable[PointGroup]):
        self.point_groups = [list(group) for group in point_groups]

    def is_empty(self) -> bool:
        return len(self.point_groups) == 0

    def point_count(self) -> int:
        return sum(len(group) for group in self.point_groups)

    def to_data(self) -> List[List[Dict[str, Any]]]:
        """Exchange-format copy of the drawing"""
        return [[point.to_dict() for point in group] for group in self.point_groups]

    @classmethod
    def from_data(cls, data: Iterable[Iterable[Dict[str, Any]]]) -> "Drawing":
        """
        Load point groups from the exchange format

        Times are taken as recorded; ordering is not validated.
        """
        return cls([Point.from_dict(raw) for raw in group] for group in data)

    def to_json(self) -> str:
        return json.dumps(self.to_data())

    @classmethod
    def from_json(cls, text: str) -> "Drawing":
        return cls.from_data(json.loads(text))

    def __len__(self) -> int:
        return len(self.point_groups)

    def __iter__(self) -> Iterator[PointGroup]:
        return iter(self.point_groups)

    def __repr__(self) -> str:
        return f"Drawing(groups={len(self.point_groups)}, points={self.point_count()})"
