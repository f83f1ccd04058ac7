"""Scale-to-fit layout of a polygon for a drawing backend.

The output is plain data: pixel positions for vertices and side midpoints,
their labels, and the optional notes column.  Rasterising, fonts and file
encoding belong to whatever backend consumes a :class:`RenderLayout`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from ..errors import TooFewPointsError
from ..figure import Polygon
from ..logging_utils import apply_debug_logging
from ..measures import FigureMeasures, convert_from_base, convert_from_base_round, round_half_away
from ..naming import LabelSequencer, side_labels
from .description import Description

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutOptions:
    """Canvas geometry in pixels."""

    canvas_width: float = 1600.0
    canvas_height: float = 1600.0
    margin_left: float = 35.0
    margin_right: float = 35.0
    margin_top: float = 35.0
    margin_bottom: float = 35.0
    notes_width: float = 320.0
    label_offset_x: float = 4.0
    label_offset_y: float = 20.0
    precision: int = 2
    label_start: str = "A"
    label_end: str = "Z"

    @property
    def margin_horizontal(self) -> float:
        return self.margin_left + self.margin_right

    @property
    def margin_vertical(self) -> float:
        return self.margin_top + self.margin_bottom


@dataclass
class VertexMark:
    pixel_x: float
    pixel_y: float
    label: str
    label_x: float
    label_y: float


@dataclass
class EdgeMark:
    """Length annotation placed at the pixel midpoint of a side."""

    pixel_x: float
    pixel_y: float
    text: str
    label: str
    length: float


@dataclass
class RenderLayout:
    scale: float
    canvas_width: int
    canvas_height: int
    vertices: List[VertexMark] = field(default_factory=list)
    edges: List[EdgeMark] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)
    notes_origin: Optional[Tuple[float, float]] = None

    def polyline(self) -> List[Tuple[float, float]]:
        return [(v.pixel_x, v.pixel_y) for v in self.vertices]


def format_number(value: float) -> str:
    """Shortest decimal text for ``value``, without a trailing ``.0``."""

    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    if text == "-0":
        text = "0"
    return text


def fit_scale(width: float, height: float, options: LayoutOptions) -> float:
    """Uniform scale fitting ``width`` x ``height`` inside the canvas margins.

    The more constrained axis wins.  A zero extent places no constraint on
    its axis; a figure with no extent at all is drawn at scale 1.
    """

    ratios = []
    if width > 0:
        ratios.append((options.canvas_width - options.margin_horizontal) / width)
    if height > 0:
        ratios.append((options.canvas_height - options.margin_vertical) / height)
    if not ratios:
        return 1.0
    return min(ratios)


def canvas_size(
    scale: float, width: float, height: float, options: LayoutOptions, draw_notes: bool
) -> Tuple[int, int]:
    w = int(round_half_away(width * scale)) + int(options.margin_horizontal)
    h = int(round_half_away(height * scale)) + int(options.margin_vertical)
    if draw_notes:
        w += int(options.margin_horizontal + options.notes_width)
    return w, h


def describe_polygon(
    polygon: Polygon,
    measures: FigureMeasures,
    precision: int = 2,
    label_start: str = "A",
    label_end: str = "Z",
) -> Description:
    """Summary notes: metrics, side lengths and vertex coordinates."""

    desc = Description()
    desc.push_back("Area", f"{polygon.area_in(measures.area, precision):.{precision}f} {measures.area}")
    desc.push_back(
        "Perimeter", f"{polygon.perimeter_in(measures.perimeter, precision):.{precision}f} {measures.perimeter}"
    )
    desc.push_back("Width", f"{polygon.width_in(measures.length, precision):.{precision}f} {measures.length}")
    desc.push_back("Height", f"{polygon.height_in(measures.length, precision):.{precision}f} {measures.length}")
    desc.push_back("Points count", str(len(polygon)))

    sides = []
    for name, side in zip(side_labels(len(polygon), label_start, label_end), polygon.sides()):
        length = convert_from_base_round(measures.length, side.distance(), precision)
        sides.append(f"{name}={format_number(length)}")
    desc.push_back("Sides", ", ".join(sides))

    point_seq = LabelSequencer(label_start, label_end)
    coords = []
    for p in polygon.points_in(measures.length, precision):
        coords.append(f"{point_seq.next()}=({format_number(p.x)};{format_number(p.y)})")
    desc.push_back("Points", ", ".join(coords))
    return desc


def compute_layout(
    polygon: Polygon,
    measures: FigureMeasures = FigureMeasures(),
    options: LayoutOptions = LayoutOptions(),
    *,
    draw_description: bool = False,
    description: Optional[Description] = None,
) -> RenderLayout:
    """Lay ``polygon`` out on a canvas; ``polygon`` is only read."""

    n = len(polygon)
    if n < 3:
        raise TooFewPointsError(f"drawing needs at least 3 points, has {n}")

    xy = np.asarray(convert_from_base(measures.length, polygon.coords()))
    mins = xy.min(axis=0)
    width, height = (xy.max(axis=0) - mins).tolist()
    scale = fit_scale(width, height, options)
    canvas_w, canvas_h = canvas_size(scale, width, height, options, draw_description)

    # geometry y grows upwards; flip only when producing pixel rows
    px = options.margin_left + (xy[:, 0] - mins[0]) * scale
    py_up = options.margin_bottom + (xy[:, 1] - mins[1]) * scale
    py = canvas_h - py_up

    layout = RenderLayout(scale=float(scale), canvas_width=canvas_w, canvas_height=canvas_h)

    vertex_seq = LabelSequencer(options.label_start, options.label_end)
    for x, y in zip(px.tolist(), py.tolist()):
        layout.vertices.append(
            VertexMark(
                pixel_x=x,
                pixel_y=y,
                label=vertex_seq.next(),
                label_x=x + options.label_offset_x,
                label_y=y + options.label_offset_y,
            )
        )

    names = side_labels(n, options.label_start, options.label_end)
    for i, side in enumerate(polygon.sides()):
        j = (i + 1) % n
        length = convert_from_base_round(measures.length, side.distance(), options.precision)
        layout.edges.append(
            EdgeMark(
                pixel_x=float((px[i] + px[j]) / 2),
                pixel_y=float((py[i] + py[j]) / 2),
                text=format_number(length),
                label=names[i],
                length=length,
            )
        )

    if draw_description:
        summary = describe_polygon(polygon, measures, options.precision, options.label_start, options.label_end)
        notes = Description.union(description, summary) if description is not None else summary
        layout.notes = notes.to_string_list()
        notes_x = round_half_away(width * scale, 2) + options.margin_horizontal + options.margin_left
        layout.notes_origin = (notes_x, options.margin_top)

    logger.info(
        "Laid out %d point(s) at scale %.4g on a %dx%d canvas (notes=%s)",
        n,
        layout.scale,
        canvas_w,
        canvas_h,
        draw_description,
    )
    return layout


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "EdgeMark",
    "LayoutOptions",
    "RenderLayout",
    "VertexMark",
    "canvas_size",
    "compute_layout",
    "describe_polygon",
    "fit_scale",
    "format_number",
]
