"""Three-vertex polygon."""

from __future__ import annotations

from typing import Iterable, Optional

from ..errors import TooManyPointsError
from .point import Point
from .polygon import Polygon


class Triangle(Polygon):
    """Polygon that refuses to grow past three vertices."""

    max_points = 3

    def __init__(self, points: Optional[Iterable[Point]] = None):
        points = list(points or [])
        if len(points) > self.max_points:
            raise TooManyPointsError(f"triangle takes at most {self.max_points} points, got {len(points)}")
        super().__init__(points)

    def _ensure_room(self) -> None:
        if len(self.points) >= self.max_points:
            raise TooManyPointsError(f"triangle already has {self.max_points} points")

    def add_point(self, x: float, y: float) -> Point:
        self._ensure_room()
        return super().add_point(x, y)

    def add_point_by_direction(self, distance: float, direction: float) -> Point:
        self._ensure_room()
        return super().add_point_by_direction(distance, direction)

    def add_point_by_angle(self, distance: float, angle: float) -> Point:
        self._ensure_room()
        return super().add_point_by_angle(distance, angle)

    def copy(self) -> "Triangle":
        return Triangle(p.copy() for p in self.points)
