import math

import pytest

from ceilings.errors import InvalidVertexError, UnknownUnitError
from ceilings.figure import AbsoluteVertex, AngleVertex, DirectionVertex, vertex_from_mapping
from ceilings.measures import FigureMeasures, length_measure_by_name


def test_kind_is_inferred_from_fields():
    assert vertex_from_mapping({'x': 1, 'y': 2}) == AbsoluteVertex(1.0, 2.0)
    assert vertex_from_mapping({'distance': 0, 'direction': 90}) == DirectionVertex(0.0, 90.0)
    assert vertex_from_mapping({'distance': 5, 'angle': 1.5, 'angle_unit': 'rad'}) == AngleVertex(
        5.0, 1.5, angle_unit='rad'
    )


def test_null_relative_fields_fall_back_to_absolute():
    vertex = vertex_from_mapping({'x': 3, 'y': 4, 'distance': 0, 'direction': None, 'angle': None})

    assert isinstance(vertex, AbsoluteVertex)


def test_explicit_kind_wins():
    vertex = vertex_from_mapping({'kind': 'direction', 'distance': 10, 'direction': 0, 'x': 1, 'y': 1})

    assert isinstance(vertex, DirectionVertex)


@pytest.mark.parametrize(
    'payload',
    [
        {'distance': 3, 'direction': 0, 'angle': 90},
        {'distance': 3},
        {'x': 'a', 'y': 1},
        {'x': True, 'y': 1},
        {'x': float('nan'), 'y': 1},
        {'kind': 'angle', 'distance': 3},
        {'kind': 'spiral', 'x': 1, 'y': 1},
        {'x': 1, 'y': 1, 'length_unit': 5},
        [1, 2],
    ],
)
def test_invalid_payloads(payload):
    with pytest.raises(InvalidVertexError):
        vertex_from_mapping(payload)


@pytest.mark.parametrize(
    'payload',
    [
        {'x': 1, 'y': 1, 'length_unit': 'cubit'},
        {'distance': 1, 'direction': 0, 'angle_unit': 'grad'},
    ],
)
def test_unknown_unit_fails_on_parse(payload):
    with pytest.raises(UnknownUnitError):
        vertex_from_mapping(payload)


def test_to_base_uses_figure_measures_by_default():
    measures = FigureMeasures()

    absolute = AbsoluteVertex(125, 50).to_base(measures)
    direction = DirectionVertex(100, 90).to_base(measures)

    assert math.isclose(absolute.x, 1.25)
    assert math.isclose(absolute.y, 0.5)
    assert math.isclose(direction.distance, 1.0)
    assert math.isclose(direction.direction, math.pi / 2)


def test_to_base_honours_per_vertex_units():
    measures = FigureMeasures.from_names({'length': 'cm', 'angle': 'deg'})

    vertex = AngleVertex(2, math.pi, length_unit='m', angle_unit='rad').to_base(measures)

    assert vertex.distance == 2.0
    assert vertex.angle == math.pi
    assert length_measure_by_name('m').factor == 1.0
