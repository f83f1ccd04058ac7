"""Vertex specifications: how a surveyor describes the next corner.

A specification is resolved into a :class:`~ceilings.figure.point.Point`
the moment it is inserted into a polygon and is not kept afterwards.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional, Union

from ..errors import InvalidVertexError
from ..measures import (
    FigureMeasures,
    angle_measure_by_name,
    convert_to_base,
    length_measure_by_name,
)


@dataclass(frozen=True)
class AbsoluteVertex:
    """Explicit ``(x, y)`` coordinates."""

    x: float
    y: float
    length_unit: Optional[str] = None

    kind: ClassVar[str] = "absolute"

    def to_base(self, measures: FigureMeasures) -> "AbsoluteVertex":
        length = _length_measure(self.length_unit, measures)
        return AbsoluteVertex(convert_to_base(length, self.x), convert_to_base(length, self.y))


@dataclass(frozen=True)
class DirectionVertex:
    """``distance`` from the last point along an absolute ``direction``."""

    distance: float
    direction: float
    length_unit: Optional[str] = None
    angle_unit: Optional[str] = None

    kind: ClassVar[str] = "direction"

    def to_base(self, measures: FigureMeasures) -> "DirectionVertex":
        length = _length_measure(self.length_unit, measures)
        angle = _angle_measure(self.angle_unit, measures)
        return DirectionVertex(convert_to_base(length, self.distance), convert_to_base(angle, self.direction))


@dataclass(frozen=True)
class AngleVertex:
    """``distance`` from the last point, turned ``angle`` from the last side."""

    distance: float
    angle: float
    length_unit: Optional[str] = None
    angle_unit: Optional[str] = None

    kind: ClassVar[str] = "angle"

    def to_base(self, measures: FigureMeasures) -> "AngleVertex":
        length = _length_measure(self.length_unit, measures)
        angle = _angle_measure(self.angle_unit, measures)
        return AngleVertex(convert_to_base(length, self.distance), convert_to_base(angle, self.angle))


VertexSpec = Union[AbsoluteVertex, DirectionVertex, AngleVertex]


def _length_measure(name: Optional[str], measures: FigureMeasures):
    return measures.length if not name else length_measure_by_name(name)


def _angle_measure(name: Optional[str], measures: FigureMeasures):
    return measures.angle if not name else angle_measure_by_name(name)


def _number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidVertexError(f"vertex field {key!r} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidVertexError(f"vertex field {key!r} must be finite, got {value!r}")
    return value


def _unit(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise InvalidVertexError(f"vertex field {key!r} must be a unit name, got {value!r}")
    return value


def _infer_kind(data: Mapping[str, Any]) -> str:
    has_direction = data.get("direction") is not None
    has_angle = data.get("angle") is not None
    if has_direction and has_angle:
        raise InvalidVertexError("vertex cannot carry both 'direction' and 'angle'")
    if has_direction:
        return DirectionVertex.kind
    if has_angle:
        return AngleVertex.kind
    if "x" in data and "y" in data:
        return AbsoluteVertex.kind
    raise InvalidVertexError(f"cannot tell vertex kind from fields {sorted(data)}")


def vertex_from_mapping(data: Mapping[str, Any]) -> VertexSpec:
    """Parse an inbound vertex payload.

    The kind comes from an explicit ``kind`` key or from which of
    ``direction``/``angle``/``x``+``y`` is present.  Unit names are validated
    here so an unknown unit fails before any geometry is touched.
    """

    if not isinstance(data, Mapping):
        raise InvalidVertexError(f"vertex must be an object, got {type(data).__name__}")

    kind = data.get("kind") or _infer_kind(data)
    length_unit = _unit(data, "length_unit")
    angle_unit = _unit(data, "angle_unit")
    if length_unit is not None:
        length_measure_by_name(length_unit)
    if angle_unit is not None:
        angle_measure_by_name(angle_unit)

    if kind == AbsoluteVertex.kind:
        return AbsoluteVertex(_number(data, "x"), _number(data, "y"), length_unit=length_unit)
    if kind == DirectionVertex.kind:
        return DirectionVertex(
            _number(data, "distance"),
            _number(data, "direction"),
            length_unit=length_unit,
            angle_unit=angle_unit,
        )
    if kind == AngleVertex.kind:
        return AngleVertex(
            _number(data, "distance"),
            _number(data, "angle"),
            length_unit=length_unit,
            angle_unit=angle_unit,
        )
    raise InvalidVertexError(f"unknown vertex kind {kind!r}")


__all__ = [
    "AbsoluteVertex",
    "AngleVertex",
    "DirectionVertex",
    "VertexSpec",
    "vertex_from_mapping",
]
