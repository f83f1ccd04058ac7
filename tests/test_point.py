import math

import pytest

from ceilings.figure import (
    Point,
    Segment,
    new_point_by_angle,
    new_point_by_direction,
    normalize_angle,
    point_direction,
)
from ceilings.measures import DEGREE, RADIAN, convert, convert_round, round_half_away


def _close(p: Point, x: float, y: float, tol: float = 1e-9) -> bool:
    return math.isclose(p.x, x, abs_tol=tol) and math.isclose(p.y, y, abs_tol=tol)


@pytest.mark.parametrize(
    'to, expected',
    [
        ((1.0, 0.0), 0.0),
        ((0.0, 1.0), math.pi / 2),
        ((-1.0, 0.0), math.pi),
        ((0.0, -1.0), 3 * math.pi / 2),
        ((1.0, -1.0), 7 * math.pi / 4),
    ],
)
def test_point_direction_cardinal(to, expected):
    assert math.isclose(point_direction(Point(0, 0), Point(*to)), expected)


@pytest.mark.parametrize('origin', [(0.0, 0.0), (15.0, 30.0)])
@pytest.mark.parametrize('degrees', list(range(0, 360, 15)))
def test_direction_round_trip_around_circle(origin, degrees):
    start = Point(*origin)
    placed = new_point_by_direction(start, 150.0, convert(DEGREE, RADIAN, degrees))

    measured = convert_round(RADIAN, DEGREE, point_direction(start, placed), 2)

    assert measured == round_half_away(degrees, 2)
    assert 0.0 <= point_direction(start, placed) < 2 * math.pi


@pytest.mark.parametrize(
    'origin, distance, degrees, expected',
    [
        ((0.0, 0.0), 140.0, 350.011, (137.878, -24.284)),
        ((15.0, 30.0), 125.0, 90.0, (15.0, 155.0)),
        ((-10.0, -30.0), 125.0, 180.0, (-135.0, -30.0)),
    ],
)
def test_new_point_by_direction(origin, distance, degrees, expected):
    p = new_point_by_direction(Point(*origin), distance, convert(DEGREE, RADIAN, degrees))

    assert p.rounded(3).as_tuple() == expected


@pytest.mark.parametrize(
    'angle, expected',
    [
        (0.0, 0.0),
        (-math.pi / 2, 3 * math.pi / 2),
        (5 * math.pi / 2, math.pi / 2),
        (2 * math.pi, 0.0),
        (-4 * math.pi, 0.0),
        (-1e-18, 0.0),
    ],
)
def test_normalize_angle(angle, expected):
    result = normalize_angle(angle)

    assert math.isclose(result, expected, abs_tol=1e-12)
    assert 0.0 <= result < 2 * math.pi


def test_new_point_by_angle_turns_from_last_side():
    up = Segment(Point(0, 0), Point(0, 125))
    p = new_point_by_angle(up, 27, math.pi / 2)
    assert _close(p, 27, 125)

    right = Segment(Point(0, 125), Point(27, 125))
    q = new_point_by_angle(right, 46, 3 * math.pi / 2)
    assert _close(q, 27, 171)


def test_new_point_by_angle_accepts_negative_angle():
    up = Segment(Point(0, 0), Point(0, 125))

    p = new_point_by_angle(up, 27, -3 * math.pi / 2)

    assert _close(p, 27, 125)


def test_segment_helpers():
    s = Segment(Point(0, 0), Point(3, 4))

    assert s.distance() == 5.0
    assert s.midpoint().as_tuple() == (1.5, 2.0)
    assert math.isclose(s.direction(), math.atan2(4, 3))


def test_point_equality_is_identity_but_position_is_comparable():
    a = Point(1, 2)
    b = a.copy()

    assert a is not b
    assert a != b
    assert a.same_position(b)
    assert a.same_position(Point(1.0005, 2), tol=1e-3)
    assert not a.same_position(Point(1.1, 2), tol=1e-3)


def test_point_rounding():
    p = Point(1.23456, -2.5)

    assert p.rounded(2).as_tuple() == (1.23, -2.5)
    assert p.as_tuple() == (1.23456, -2.5)

    p.round(0)
    assert p.as_tuple() == (1.0, -3.0)
