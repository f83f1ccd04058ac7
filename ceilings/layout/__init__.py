"""Render-layout transform: polygon -> scaled, labelled drawing primitives."""

from .description import Description
from .generator import (
    EdgeMark,
    LayoutOptions,
    RenderLayout,
    VertexMark,
    compute_layout,
    describe_polygon,
    fit_scale,
    format_number,
)

__all__ = [
    "Description",
    "EdgeMark",
    "LayoutOptions",
    "RenderLayout",
    "VertexMark",
    "compute_layout",
    "describe_polygon",
    "fit_scale",
    "format_number",
]
