"""Example pipeline: walk a room outline and lay it out for drawing."""

from ceilings import Description, Drawing

WALK = [
    {"distance": 125, "direction": 90},
    {"distance": 27, "angle": 90},
    {"distance": 46, "angle": 270},
    {"x": 222.01, "y": 169.98},
    {"x": 225, "y": 0},
]


def main() -> None:
    drawing = Drawing.zero()
    drawing.description = Description([("Room", "Hall")])
    drawing.add_vertices(WALK)
    calc = drawing.calculations()
    print("Area:", calc.area, calc.measures["area"])
    print("Perimeter:", calc.perimeter, calc.measures["perimeter"])
    for idx, p in enumerate(drawing.points()):
        print(f"[{idx}] ({p.x}, {p.y})")
    layout = drawing.layout(draw_description=True)
    print(f"Canvas: {layout.canvas_width}x{layout.canvas_height} at scale {layout.scale:.3f}")
    for line in layout.notes:
        print(line)


if __name__ == "__main__":
    main()
