import math

import pytest

from ceilings import Description, Drawing, FigureMeasures
from ceilings.errors import IndexOutOfRangeError, NotEnoughPointsError, UnknownUnitError
from ceilings.figure import DirectionVertex
from ceilings.measures import METRE

EXAMPLE1_CM = [(0, 0), (0, 125), (27, 125), (27.01, 171), (222.01, 169.98), (225, 0)]


def _example1() -> Drawing:
    return Drawing.from_vertices([{'x': x, 'y': y} for x, y in EXAMPLE1_CM])


def _square(side: float = 100) -> Drawing:
    drawing = Drawing.zero()
    drawing.add_point(side, 0)
    drawing.add_point(side, side)
    drawing.add_point(0, side)
    return drawing


def test_walk_the_room_in_caller_units():
    drawing = Drawing.zero()

    drawing.add_point_by_direction(125, 90)
    drawing.add_point_by_angle(27, 90)
    drawing.add_point_by_angle(46, 270)

    assert [p.as_tuple() for p in drawing.points()] == [(0, 0), (0, 125), (27, 125), (27, 171)]
    assert math.isclose(drawing.polygon.point(3).y, 1.71)


def test_calculations_for_surveyed_room():
    calc = _example1().calculations()

    assert calc.area == 3.69
    assert calc.perimeter == 7.88
    assert calc.width == 225.0
    assert calc.height == 171.0
    assert calc.points_count == 6
    assert calc.as_dict()['measures'] == {'length': 'cm', 'perimeter': 'm', 'area': 'm2', 'angle': 'deg'}


def test_presentation_units_do_not_touch_geometry():
    drawing = _example1()
    before = drawing.polygon.coords().copy()

    other = drawing.with_measures(FigureMeasures.from_names({'length': 'mm', 'area': 'cm2'}))

    assert other.width() == 2250.0
    assert other.area(0) == 36876.0
    assert drawing.width() == 225.0
    assert (drawing.polygon.coords() == before).all()


def test_update_measures_is_atomic():
    drawing = _example1()

    drawing.update_measures({'length': 'm'})
    assert drawing.width() == 2.25

    with pytest.raises(UnknownUnitError):
        drawing.update_measures({'length': 'mm', 'area': 'acre'})
    assert drawing.measures.length == METRE


def test_explicit_units_override_measures():
    drawing = Drawing.zero()

    drawing.add_point(1.5, 0, unit='m')
    drawing.add_point_by_direction(0.5, math.pi / 2, length_unit='m', angle_unit='rad')

    assert [p.as_tuple() for p in drawing.points()] == [(0, 0), (150, 0), (150, 50)]
    assert [p.as_tuple() for p in drawing.points('m', 3)] == [(0, 0), (1.5, 0), (1.5, 0.5)]


def test_unknown_unit_leaves_polygon_untouched():
    drawing = _square()

    with pytest.raises(UnknownUnitError):
        drawing.add_point(1, 1, unit='furlong')
    with pytest.raises(UnknownUnitError):
        drawing.add_vertex({'distance': 1, 'direction': 0, 'angle_unit': 'grad'})

    assert len(drawing) == 4


def test_add_vertices_resolves_specs_and_payloads():
    drawing = Drawing.zero()

    drawing.add_vertices(
        [
            DirectionVertex(200, 0),
            {'distance': 100, 'angle': 270},
            {'x': 0, 'y': 1, 'length_unit': 'm'},
        ]
    )

    assert [p.as_tuple() for p in drawing.points()] == [(0, 0), (200, 0), (200, 100), (0, 100)]
    assert drawing.area() == 2.0


def test_relative_vertex_on_empty_drawing():
    drawing = Drawing()

    with pytest.raises(NotEnoughPointsError):
        drawing.add_vertex({'distance': 1, 'direction': 0})


def test_edit_points():
    drawing = _square()

    drawing.set_point(2, 120, 100)
    assert drawing.points()[2].as_tuple() == (120, 100)

    removed = drawing.delete_point(0)
    assert removed.as_tuple() == (0, 0)
    assert len(drawing) == 3

    with pytest.raises(IndexOutOfRangeError):
        drawing.set_point(3, 0, 0)


def test_rotate_about_vertex():
    drawing = _square()

    drawing.rotate(0, 90)

    assert [p.as_tuple() for p in drawing.points()] == [(0, 0), (0, 100), (-100, 100), (-100, 0)]
    assert drawing.area() == 1.0


@pytest.mark.parametrize('precision', [-1, 1.5, True])
def test_points_rejects_bad_precision(precision):
    with pytest.raises(ValueError):
        _square().points(precision=precision)


def test_layout_carries_user_notes():
    drawing = _square()
    drawing.description = Description([('Room', 'Kitchen')])

    layout = drawing.layout(draw_description=True, precision=1)

    assert layout.notes[0] == 'Room: Kitchen'
    assert 'Area: 1.0 m2' in layout.notes
    assert layout.edges[0].text == '100'


def test_with_measures_returns_independent_copy():
    drawing = _square()
    drawing.description = Description([('Room', 'Kitchen')])

    other = drawing.with_measures(FigureMeasures.from_names({'length': 'm'}))
    other.add_point(0.5, 0.5)
    other.description.push_back('Ceiling', 'stretch')
    other.set_point(0, 0.1, 0.1)

    assert len(drawing) == 4
    assert len(other) == 5
    assert len(drawing.description) == 1
    assert drawing.points()[0].as_tuple() == (0, 0)
