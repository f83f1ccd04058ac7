"""Incrementally built polygon with unit-aware metrics."""

from __future__ import annotations

import logging
import math
import operator
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from ..errors import IndexOutOfRangeError, InvalidVertexError, NotEnoughPointsError
from ..measures import AreaMeasure, LengthMeasure, convert_from_base, convert_from_base_round
from .point import Point, Segment, new_point_by_angle, new_point_by_direction
from .vertex import AbsoluteVertex, AngleVertex, DirectionVertex, VertexSpec

logger = logging.getLogger(__name__)


class Polygon:
    """Ordered vertex list; the last vertex implicitly connects to the first.

    Vertices are addressed by position only: deleting a vertex shifts every
    later index down by one, so indices held by a caller go stale.
    """

    def __init__(self, points: Optional[Iterable[Point]] = None):
        self.points: List[Point] = list(points or [])

    @classmethod
    def zero(cls) -> "Polygon":
        """Polygon anchored with a single vertex at the origin."""

        return cls([Point(0.0, 0.0)])

    @classmethod
    def from_coords(cls, coords: Iterable[Tuple[float, float]]) -> "Polygon":
        return cls(Point(x, y) for x, y in coords)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __repr__(self) -> str:
        return f"Polygon({[p.as_tuple() for p in self.points]!r})"

    def copy(self) -> "Polygon":
        return Polygon(p.copy() for p in self.points)

    def coords(self) -> np.ndarray:
        """Vertices as an ``(n, 2)`` float array."""

        return np.array([(p.x, p.y) for p in self.points], dtype=float).reshape(-1, 2)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def point(self, index: int) -> Point:
        return self.points[self._check_index(index)]

    def last_point(self) -> Point:
        if not self.points:
            raise NotEnoughPointsError("polygon has no points", required=1, available=0)
        return self.points[-1]

    def last_side(self) -> Segment:
        n = len(self.points)
        if n < 2:
            raise NotEnoughPointsError(
                f"polygon needs at least 2 points for a last side, has {n}", required=2, available=n
            )
        return Segment(self.points[-2], self.points[-1])

    def sides(self) -> List[Segment]:
        n = len(self.points)
        if n <= 1:
            return []
        return [Segment(self.points[i], self.points[(i + 1) % n]) for i in range(n)]

    def diagonals_count(self) -> int:
        n = len(self.points)
        return max((n * n - 3 * n) // 2, 0)

    def left_point(self) -> Point:
        if not self.points:
            raise NotEnoughPointsError("polygon has no points", required=1, available=0)
        return min(self.points, key=lambda p: p.x)

    def low_point(self) -> Point:
        if not self.points:
            raise NotEnoughPointsError("polygon has no points", required=1, available=0)
        return min(self.points, key=lambda p: p.y)

    def _check_index(self, index: int) -> int:
        """Position for ``index``; accepts any integer type, numpy ones included."""

        n = len(self.points)
        if isinstance(index, bool):
            raise IndexOutOfRangeError(index, n)
        try:
            position = operator.index(index)
        except TypeError:
            raise IndexOutOfRangeError(index, n) from None
        if not 0 <= position < n:
            raise IndexOutOfRangeError(index, n)
        return position

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add_point(self, x: float, y: float) -> Point:
        """Append a vertex at ``(x, y)`` given in base units."""

        point = Point(x, y)
        self.points.append(point)
        logger.debug("Added absolute point #%d at (%.6g, %.6g)", len(self.points) - 1, point.x, point.y)
        return point

    def add_point_by_direction(self, distance: float, direction: float) -> Point:
        """Append a vertex ``distance`` from the last one along ``direction`` radians."""

        if not self.points:
            raise NotEnoughPointsError(
                "polygon needs at least 1 point to place a point by direction", required=1, available=0
            )
        point = new_point_by_direction(self.points[-1], distance, direction)
        self.points.append(point)
        logger.debug(
            "Added point #%d by direction %.6g rad, distance %.6g -> (%.6g, %.6g)",
            len(self.points) - 1,
            direction,
            distance,
            point.x,
            point.y,
        )
        return point

    def add_point_by_angle(self, distance: float, angle: float) -> Point:
        """Append a vertex ``distance`` from the last one, turned ``angle`` radians from the last side."""

        n = len(self.points)
        if n < 2:
            raise NotEnoughPointsError(
                f"polygon needs at least 2 points to place a point by angle, has {n}",
                required=2,
                available=n,
            )
        point = new_point_by_angle(self.last_side(), distance, angle)
        self.points.append(point)
        logger.debug(
            "Added point #%d by angle %.6g rad, distance %.6g -> (%.6g, %.6g)",
            n,
            angle,
            distance,
            point.x,
            point.y,
        )
        return point

    def add(self, vertex: VertexSpec) -> Point:
        """Resolve a vertex specification already expressed in base units."""

        if isinstance(vertex, AbsoluteVertex):
            return self.add_point(vertex.x, vertex.y)
        if isinstance(vertex, DirectionVertex):
            return self.add_point_by_direction(vertex.distance, vertex.direction)
        if isinstance(vertex, AngleVertex):
            return self.add_point_by_angle(vertex.distance, vertex.angle)
        raise InvalidVertexError(f"unsupported vertex specification {vertex!r}")

    def set_point(self, index: int, point: Union[Point, Tuple[float, float]]) -> None:
        index = self._check_index(index)
        if not isinstance(point, Point):
            point = Point(*point)
        self.points[index] = point
        logger.debug("Set point #%d to (%.6g, %.6g)", index, point.x, point.y)

    def delete_point(self, index: int) -> Point:
        index = self._check_index(index)
        removed = self.points.pop(index)
        logger.debug("Deleted point #%d, %d point(s) left", index, len(self.points))
        return removed

    def round_points(self, precision: int) -> None:
        for p in self.points:
            p.round(precision)

    def rotate(self, pivot: Point, angle: float) -> None:
        """Rotate every vertex by ``angle`` radians around ``pivot``.

        The pivot itself is skipped by identity, not by value.
        """

        cos_a, sin_a = math.cos(angle), math.sin(angle)
        matrix = np.array([[cos_a, -sin_a], [sin_a, cos_a]])
        origin = np.array([pivot.x, pivot.y])
        for p in self.points:
            if p is pivot:
                continue
            x, y = matrix @ (np.array([p.x, p.y]) - origin) + origin
            p.x, p.y = float(x), float(y)
        logger.debug("Rotated %d point(s) by %.6g rad", len(self.points), angle)

    # ------------------------------------------------------------------
    # Metrics (base units)
    # ------------------------------------------------------------------
    def area(self) -> float:
        """Shoelace area; ``0`` for fewer than 3 points."""

        if len(self.points) < 3:
            return 0.0
        xy = self.coords()
        x, y = xy[:, 0], xy[:, 1]
        return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))

    def perimeter(self) -> float:
        if len(self.points) < 2:
            return 0.0
        xy = self.coords()
        deltas = np.roll(xy, -1, axis=0) - xy
        return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())

    def width(self) -> float:
        if len(self.points) < 2:
            return 0.0
        xs = self.coords()[:, 0]
        return float(xs.max() - xs.min())

    def height(self) -> float:
        if len(self.points) < 2:
            return 0.0
        ys = self.coords()[:, 1]
        return float(ys.max() - ys.min())

    # ------------------------------------------------------------------
    # Metrics (presentation units)
    # ------------------------------------------------------------------
    def area_in(self, measure: AreaMeasure, precision: Optional[int] = None) -> float:
        return _present(measure, self.area(), precision)

    def perimeter_in(self, measure: LengthMeasure, precision: Optional[int] = None) -> float:
        return _present(measure, self.perimeter(), precision)

    def width_in(self, measure: LengthMeasure, precision: Optional[int] = None) -> float:
        return _present(measure, self.width(), precision)

    def height_in(self, measure: LengthMeasure, precision: Optional[int] = None) -> float:
        return _present(measure, self.height(), precision)

    def points_in(self, measure: LengthMeasure, precision: int) -> List[Point]:
        """Copies of the vertices converted to ``measure`` and rounded."""

        return [
            Point(
                convert_from_base_round(measure, p.x, precision),
                convert_from_base_round(measure, p.y, precision),
            )
            for p in self.points
        ]


def _present(measure, value: float, precision: Optional[int]) -> float:
    if precision is None:
        return convert_from_base(measure, value)
    return convert_from_base_round(measure, value, precision)


__all__ = ["Polygon"]
