import math
import random

import pytest

from cpkit.geo_point import (
    Point,
    cross,
    cross2,
    deg_to_rad,
    dist,
    dist2,
    dot,
    get_angle,
    is_point_in_angle,
    orientation,
    polar_sort,
    rad_to_deg,
    rotate_ccw,
    rotate_ccw90,
    rotate_cw,
    rotate_cw90,
    sign,
)

A = Point(2.0, -1.5)
B = Point(-0.5, 3.0)


@pytest.mark.parametrize("value, expected", [(1e-12, 0), (-1e-12, 0), (3.0, 1), (-3.0, -1)])
def test_sign(value, expected):
    assert sign(value) == expected


def test_addition_round_trip():
    assert (A + B) - B == A


def test_scalar_multiplication_commutes():
    assert 2 * A == A * 2
    assert A * 2 == A + A


def test_division_undoes_multiplication():
    assert (A * 3) / 3 == A


def test_negation():
    assert -A + A == Point()


def test_equality_tolerates_eps():
    assert Point(1, 1) == Point(1 + 1e-12, 1 - 1e-12)
    assert not Point(1, 1) == Point(1 + 1e-6, 1)
    assert Point(1, 1) != Point(1, 1.001)


def test_ordering():
    assert Point(0, 5) < Point(1, 0)
    assert Point(1, 0) < Point(1, 2)
    assert Point(1, 2) > Point(1, 0)
    assert not Point(1, 1) < Point(1 + 1e-12, 0)


def test_membership_uses_tolerant_equality():
    points = [Point(1, 1), Point(2, 3)]
    assert Point(1 + 1e-12, 1) in points
    assert Point(2, 3 - 1e-12) in points
    assert Point(1, 1.001) not in points


def test_str():
    assert str(Point(1.5, -2)) == "(1.5,-2)"


def test_norm():
    assert Point(3, 4).norm() == pytest.approx(5.0)
    assert A.norm2() == pytest.approx(A.norm() ** 2)


def test_perp_is_orthogonal():
    p = A.perp()
    assert dot(A, p) == pytest.approx(0.0)
    assert cross(A, p) == pytest.approx(A.norm2())
    assert p == rotate_ccw90(A)


@pytest.mark.parametrize("t", [-2.5, -1.0, 0.3, 1.2, 3.0])
def test_arg_round_trip(t):
    assert Point(math.cos(t), math.sin(t)).arg() == pytest.approx(t)


@pytest.mark.parametrize("r", [0.5, 1.0, 7.25])
def test_truncate_keeps_direction(r):
    v = A.truncate(r)
    assert v.norm() == pytest.approx(r)
    assert cross(A, v) == pytest.approx(0.0, abs=1e-9)
    assert dot(A, v) > 0


def test_truncate_zero_vector():
    assert Point(0, 0).truncate(5) == Point(0, 0)


def test_distances():
    assert dist2(A, B) == pytest.approx(dot(A - B, A - B))
    assert dist(A, B) == pytest.approx(math.sqrt(dist2(A, B)))
    assert dist(A, B) == pytest.approx(dist(B, A))


def test_cross_is_antisymmetric():
    assert cross(A, B) == pytest.approx(-cross(B, A))
    assert cross(A, A) == 0


def test_cross2_is_translation_invariant():
    c = Point(0.25, 0.75)
    t = Point(10, -4)
    assert cross2(A, B, c) == pytest.approx(cross2(A + t, B + t, c + t))
    assert cross2(A, B, c) == pytest.approx(cross(B - A, c - A))


def test_orientation():
    o, x, y = Point(0, 0), Point(1, 0), Point(0, 1)
    assert orientation(o, x, y) == 1
    assert orientation(o, y, x) == -1
    assert orientation(o, x, Point(5, 0)) == 0


def test_rotations():
    assert rotate_ccw(A, math.pi / 2) == rotate_ccw90(A)
    assert rotate_cw(A, math.pi / 2) == rotate_cw90(A)
    assert rotate_cw(rotate_ccw(A, 0.7), 0.7) == A
    assert rotate_cw90(rotate_ccw90(A)) == A
    assert rotate_ccw(A, 1.3).norm() == pytest.approx(A.norm())


def test_degree_conversion():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert rad_to_deg(deg_to_rad(37.5)) == pytest.approx(37.5)


@pytest.mark.parametrize("t", [0.1, 1.0, 2.5])
def test_get_angle(t):
    assert get_angle(A, rotate_ccw(A, t)) == pytest.approx(t)
    assert get_angle(A, rotate_cw(A, t)) == pytest.approx(t)


def test_get_angle_extremes():
    assert get_angle(A, -A) == pytest.approx(math.pi)
    assert get_angle(A, A * 3) == pytest.approx(0.0, abs=1e-6)


def test_is_point_in_angle():
    a, b, c = Point(0, 0), Point(1, 0), Point(0, 1)
    assert is_point_in_angle(b, a, c, Point(1, 1))
    assert not is_point_in_angle(b, a, c, Point(-1, -1))
    assert is_point_in_angle(c, a, b, Point(1, 1))
    assert is_point_in_angle(b, a, c, Point(3, 0))


def test_is_point_in_angle_rejects_collinear_arms():
    with pytest.raises(ValueError):
        is_point_in_angle(Point(1, 0), Point(0, 0), Point(2, 0), Point(1, 1))


def _random_points(seed, count=40):
    rng = random.Random(seed)
    return [Point(rng.uniform(-10, 10), rng.uniform(-10, 10)) for _ in range(count)]


def test_polar_sort_orders_by_angle():
    points = _random_points(1)
    result = polar_sort(points)
    assert sorted((p.x, p.y) for p in result) == sorted((p.x, p.y) for p in points)
    args = [p.arg() for p in result]
    assert all(x <= y + 1e-12 for x, y in zip(args, args[1:]))


def test_polar_sort_around_origin():
    origin = Point(1.5, -2.5)
    points = _random_points(2)
    result = polar_sort(points, origin)
    args = [(p - origin).arg() for p in result]
    assert all(x <= y + 1e-12 for x, y in zip(args, args[1:]))
    assert len(result) == len(points)


def test_polar_sort_breaks_ties_by_distance():
    assert polar_sort([Point(2, 2), Point(1, 1)]) == [Point(1, 1), Point(2, 2)]


def test_polar_sort_leaves_input_alone():
    points = [Point(0, 1), Point(1, 0)]
    polar_sort(points)
    assert points == [Point(0, 1), Point(1, 0)]