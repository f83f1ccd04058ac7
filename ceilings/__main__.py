import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ceilings import (
    CeilingsError,
    Description,
    Drawing,
    FigureMeasures,
    LayoutOptions,
)
from ceilings.errors import InvalidSurveyError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def load_drawing(payload: Dict[str, Any]) -> Drawing:
    """Build a drawing from a survey document.

    ``{"measures": {"length": "cm", ...}, "points": [...], "description": [[key, value], ...]}``
    """

    if not isinstance(payload, dict):
        raise InvalidSurveyError(f"survey must be an object, got {type(payload).__name__}")
    names = payload.get("measures") or {}
    if not isinstance(names, dict):
        raise InvalidSurveyError("survey 'measures' must be an object")
    notes = payload.get("description") or []
    if not isinstance(notes, list):
        raise InvalidSurveyError("survey 'description' must be a list of [key, value] pairs")
    points = payload.get("points") or []
    if not isinstance(points, list):
        raise InvalidSurveyError("survey 'points' must be a list")
    measures = FigureMeasures.from_names(names)
    description = Description(notes)
    return Drawing.from_vertices(points, measures=measures, description=description)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compute room outline metrics from a survey")
    parser.add_argument("path", help="Path to the JSON survey document")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=2,
        help="Decimal places for printed values (default: 2)",
    )
    parser.add_argument(
        "--unit",
        help="Length unit for printed coordinates (default: the survey's length unit)",
    )
    parser.add_argument(
        "--layout-output-path",
        help="Write the render layout as JSON to the given path",
    )
    parser.add_argument(
        "--draw-description",
        action="store_true",
        help="Include the notes column in the render layout",
    )
    parser.add_argument("--canvas-width", type=float, default=LayoutOptions.canvas_width)
    parser.add_argument("--canvas-height", type=float, default=LayoutOptions.canvas_height)
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    if args.precision < 0:
        parser.error("--precision must be non-negative")

    with open(args.path, encoding="utf-8") as fin:
        payload = json.load(fin)

    logger.info("Loading survey from %s", args.path)
    try:
        drawing = load_drawing(payload)
        calculations = drawing.calculations(args.precision)
        points = drawing.points(args.unit, args.precision)
        layout = None
        if args.layout_output_path:
            options = LayoutOptions(
                canvas_width=args.canvas_width,
                canvas_height=args.canvas_height,
                precision=args.precision,
            )
            layout = drawing.layout(args.draw_description, options)
    except CeilingsError as exc:
        logger.error("Invalid survey: %s", exc)
        raise SystemExit(2) from exc

    names = calculations.measures
    print(f"Points: {calculations.points_count}")
    print(f"Area: {calculations.area} {names['area']}")
    print(f"Perimeter: {calculations.perimeter} {names['perimeter']}")
    print(f"Width: {calculations.width} {names['length']}")
    print(f"Height: {calculations.height} {names['length']}")
    print("Coordinates:")
    for idx, p in enumerate(points):
        print(f"  [{idx}] ({p.x}, {p.y})")

    if layout is not None:
        output_path = Path(args.layout_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing render layout to %s", output_path)
        output_path.write_text(json.dumps(asdict(layout), indent=2), encoding="utf-8")
        print(f"Layout written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
