"""A surveyed drawing: polygon, presentation units and user notes."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from .figure import Point, Polygon, VertexSpec, vertex_from_mapping
from .layout import Description, LayoutOptions, RenderLayout, compute_layout
from .measures import (
    AngleMeasure,
    FigureMeasures,
    LengthMeasure,
    angle_measure_by_name,
    convert_to_base,
    length_measure_by_name,
)

logger = logging.getLogger(__name__)

NUMBERS_PRECISION = 2

UnitArg = Union[None, str, LengthMeasure, AngleMeasure]


@dataclass
class DrawingCalculations:
    """Metrics of a drawing in its presentation units."""

    area: float
    perimeter: float
    width: float
    height: float
    points_count: int
    measures: Dict[str, str]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "area": self.area,
            "perimeter": self.perimeter,
            "width": self.width,
            "height": self.height,
            "points_count": self.points_count,
            "measures": dict(self.measures),
        }


def _length_unit(unit: UnitArg, default: LengthMeasure) -> LengthMeasure:
    if unit is None or unit == "":
        return default
    if isinstance(unit, LengthMeasure):
        return unit
    return length_measure_by_name(unit)


def _angle_unit(unit: UnitArg, default: AngleMeasure) -> AngleMeasure:
    if unit is None or unit == "":
        return default
    if isinstance(unit, AngleMeasure):
        return unit
    return angle_measure_by_name(unit)


class Drawing:
    """Polygon plus the units its values are accepted and shown in.

    Caller-facing values are in :attr:`measures` unless an explicit unit is
    passed; the polygon always stores base units.  One drawing belongs to one
    caller at a time.
    """

    def __init__(
        self,
        polygon: Optional[Polygon] = None,
        measures: Optional[FigureMeasures] = None,
        description: Optional[Description] = None,
    ):
        self.polygon = polygon if polygon is not None else Polygon()
        self.measures = measures or FigureMeasures()
        self.description = description or Description()

    @classmethod
    def zero(cls, measures: Optional[FigureMeasures] = None) -> "Drawing":
        """Drawing anchored at the origin, ready for relative placements."""

        return cls(Polygon.zero(), measures)

    @classmethod
    def from_vertices(
        cls,
        vertices: Iterable[Union[VertexSpec, Mapping[str, Any]]],
        measures: Optional[FigureMeasures] = None,
        description: Optional[Description] = None,
    ) -> "Drawing":
        drawing = cls(measures=measures, description=description)
        for vertex in vertices:
            drawing.add_vertex(vertex)
        logger.info("Built drawing with %d point(s)", len(drawing))
        return drawing

    def __len__(self) -> int:
        return len(self.polygon)

    def with_measures(self, measures: FigureMeasures) -> "Drawing":
        """Copy of this drawing shown in other units; later edits do not reach the original."""

        return Drawing(self.polygon.copy(), measures, Description.union(self.description))

    def update_measures(self, names: Mapping[str, Optional[str]]) -> None:
        self.measures = FigureMeasures.from_names(names, previous=self.measures)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add_point(self, x: float, y: float, unit: UnitArg = None) -> Point:
        length = _length_unit(unit, self.measures.length)
        return self.polygon.add_point(convert_to_base(length, x), convert_to_base(length, y))

    def add_point_by_direction(
        self, distance: float, direction: float, length_unit: UnitArg = None, angle_unit: UnitArg = None
    ) -> Point:
        length = _length_unit(length_unit, self.measures.length)
        angle = _angle_unit(angle_unit, self.measures.angle)
        return self.polygon.add_point_by_direction(convert_to_base(length, distance), convert_to_base(angle, direction))

    def add_point_by_angle(
        self, distance: float, angle: float, length_unit: UnitArg = None, angle_unit: UnitArg = None
    ) -> Point:
        length = _length_unit(length_unit, self.measures.length)
        angle_measure = _angle_unit(angle_unit, self.measures.angle)
        return self.polygon.add_point_by_angle(
            convert_to_base(length, distance), convert_to_base(angle_measure, angle)
        )

    def add_vertex(self, vertex: Union[VertexSpec, Mapping[str, Any]]) -> Point:
        if isinstance(vertex, Mapping):
            vertex = vertex_from_mapping(vertex)
        return self.polygon.add(vertex.to_base(self.measures))

    def add_vertices(self, vertices: Sequence[Union[VertexSpec, Mapping[str, Any]]]) -> List[Point]:
        return [self.add_vertex(vertex) for vertex in vertices]

    def set_point(self, index: int, x: float, y: float, unit: UnitArg = None) -> None:
        length = _length_unit(unit, self.measures.length)
        self.polygon.set_point(index, Point(convert_to_base(length, x), convert_to_base(length, y)))

    def delete_point(self, index: int) -> Point:
        return self.polygon.delete_point(index)

    def rotate(self, pivot_index: int, angle: float, unit: UnitArg = None) -> None:
        angle_measure = _angle_unit(unit, self.measures.angle)
        self.polygon.rotate(self.polygon.point(pivot_index), convert_to_base(angle_measure, angle))

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def area(self, precision: int = NUMBERS_PRECISION) -> float:
        return self.polygon.area_in(self.measures.area, precision)

    def perimeter(self, precision: int = NUMBERS_PRECISION) -> float:
        return self.polygon.perimeter_in(self.measures.perimeter, precision)

    def width(self, precision: int = NUMBERS_PRECISION) -> float:
        return self.polygon.width_in(self.measures.length, precision)

    def height(self, precision: int = NUMBERS_PRECISION) -> float:
        return self.polygon.height_in(self.measures.length, precision)

    def points(self, unit: UnitArg = None, precision: int = NUMBERS_PRECISION) -> List[Point]:
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            raise ValueError(f"precision must be a non-negative integer, got {precision!r}")
        return self.polygon.points_in(_length_unit(unit, self.measures.length), precision)

    def calculations(self, precision: int = NUMBERS_PRECISION) -> DrawingCalculations:
        return DrawingCalculations(
            area=self.area(precision),
            perimeter=self.perimeter(precision),
            width=self.width(precision),
            height=self.height(precision),
            points_count=len(self.polygon),
            measures=self.measures.to_names(),
        )

    def layout(
        self,
        draw_description: bool = False,
        options: Optional[LayoutOptions] = None,
        precision: Optional[int] = None,
    ) -> RenderLayout:
        options = options or LayoutOptions()
        if precision is not None:
            options = replace(options, precision=precision)
        return compute_layout(
            self.polygon,
            self.measures,
            options,
            draw_description=draw_description,
            description=self.description,
        )


__all__ = ["Drawing", "DrawingCalculations", "NUMBERS_PRECISION"]
