"""Point and segment primitives plus direction arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..measures import round_half_away

TWO_PI = 2.0 * math.pi


@dataclass(eq=False)
class Point:
    """A vertex position in base length units.

    Equality is by value via :meth:`same_position`; ``==`` is identity so
    that a polygon can tell its own vertex apart from a value-equal copy.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def same_position(self, other: "Point", tol: float = 0.0) -> bool:
        return abs(self.x - other.x) <= tol and abs(self.y - other.y) <= tol

    def rounded(self, precision: int) -> "Point":
        return Point(round_half_away(self.x, precision), round_half_away(self.y, precision))

    def round(self, precision: int) -> None:
        self.x = round_half_away(self.x, precision)
        self.y = round_half_away(self.y, precision)

    def copy(self) -> "Point":
        return Point(self.x, self.y)


@dataclass
class Segment:
    """Ordered pair of points; ``a`` is the start and ``b`` the end."""

    a: Point
    b: Point

    def distance(self) -> float:
        return math.hypot(self.b.x - self.a.x, self.b.y - self.a.y)

    def direction(self) -> float:
        return point_direction(self.a, self.b)

    def midpoint(self) -> Point:
        return Point((self.a.x + self.b.x) * 0.5, (self.a.y + self.b.y) * 0.5)


def normalize_angle(angle: float) -> float:
    """Reduce ``angle`` (radians) into ``[0, 2π)``; correct for negative input."""

    reduced = math.fmod(math.fmod(angle, TWO_PI) + TWO_PI, TWO_PI)
    # fmod of a tiny negative value plus 2π can round up to exactly 2π
    if reduced >= TWO_PI:
        return 0.0
    return reduced


def point_direction(frm: Point, to: Point) -> float:
    """Direction in radians from ``frm`` towards ``to``, in ``[0, 2π)``."""

    r = math.atan2(to.y - frm.y, to.x - frm.x)
    if r < 0:
        r += TWO_PI
    if r >= TWO_PI:
        return 0.0
    return r


def new_point_by_direction(origin: Point, distance: float, direction: float) -> Point:
    """Point ``distance`` away from ``origin`` along absolute ``direction``."""

    return Point(
        origin.x + distance * math.cos(direction),
        origin.y + distance * math.sin(direction),
    )


def new_point_by_angle(last_segment: Segment, distance: float, angle: float) -> Point:
    """Point ``distance`` away from ``last_segment.b`` turned ``angle`` from the segment.

    The angle is measured from the direction pointing back along the last
    segment, so walking a perimeter the caller never tracks a heading.
    """

    direction = normalize_angle(point_direction(last_segment.b, last_segment.a) + angle)
    return new_point_by_direction(last_segment.b, distance, direction)
