"""Planar figure primitives and the polygon builder."""

from .point import (
    Point,
    Segment,
    new_point_by_angle,
    new_point_by_direction,
    normalize_angle,
    point_direction,
)
from .polygon import Polygon
from .triangle import Triangle
from .vertex import AbsoluteVertex, AngleVertex, DirectionVertex, VertexSpec, vertex_from_mapping

__all__ = [
    "AbsoluteVertex",
    "AngleVertex",
    "DirectionVertex",
    "Point",
    "Polygon",
    "Segment",
    "Triangle",
    "VertexSpec",
    "new_point_by_angle",
    "new_point_by_direction",
    "normalize_angle",
    "point_direction",
    "vertex_from_mapping",
]
