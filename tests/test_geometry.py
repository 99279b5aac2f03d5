from dataclasses import FrozenInstanceError
from fractions import Fraction

import pytest

from rattrig.geometry import Line2D, Point2D, Point3D, Triangle2D, Triangle3D, Vector2D, Vector3D


def test_point_from_tuple_and_back():
    p = Point2D.of((1, 2))
    assert (p.x, p.y) == (1, 2)
    assert p.as_tuple() == (1, 2)
    assert Point3D.of((1, 2, 3)) == Point3D(1, 2, 3)


def test_records_are_immutable():
    p = Point2D(1, 2)
    with pytest.raises(FrozenInstanceError):
        p.x = 5


def test_point_quadrance_accepts_records_and_tuples():
    assert Point2D(1, 1).quadrance(Point2D(4, 5)) == 25
    assert Point2D(1, 1).quadrance((4, 5)) == 25
    assert Point3D(0, 0, 0).quadrance(Point3D(2, 3, 6)) == 49


def test_vector_arithmetic():
    v1 = Vector2D(1, 2)
    v2 = Vector2D(3, 4)
    assert v1 + v2 == Vector2D(4, 6)
    assert v2 - v1 == Vector2D(2, 2)
    assert Vector3D(1, 2, 3) - Vector3D(1, 1, 1) == Vector3D(0, 1, 2)


def test_vector_from_point_keeps_coordinates():
    assert Vector2D.from_point(Point2D(3, 4)) == Vector2D(3, 4)
    assert Vector3D.from_point(Point3D(1, 2, 3)).as_tuple() == (1, 2, 3)


def test_vector_formulas():
    v = Vector2D(1.0, 1.0)
    w = Vector2D(1.0, 0.0)
    assert v.quadrance() == 2.0
    assert v.dot(w) == 1.0
    assert v.cross(w) == -1.0
    assert v.spread(w) == 0.5
    assert Vector2D(1, 0).dilatation(Vector2D(0, 2)) == 4


def test_vector3d_cross_and_spread():
    x = Vector3D(1, 0, 0)
    y = Vector3D(0, 1, 0)
    assert x.cross(y) == Vector3D(0, 0, 1)
    assert x.spread(y) == 1
    assert Vector3D(1, 2, 2).quadrance() == 9


def test_line_through_two_points():
    line = Line2D.through((0, 0), (1, 1))
    assert line.contains((5, 5))
    assert not line.contains((1, 2))
    assert line.quadrance_to((1, -1)) == 2


def test_line_relations():
    horizontal = Line2D(0, 1, 0)
    vertical = Line2D(1, 0, 0)
    diagonal = Line2D(1, 1, 0)
    assert horizontal.is_perpendicular(vertical)
    assert diagonal.is_parallel(Line2D(2, 2, 1))
    assert horizontal.spread(vertical) == 1
    assert diagonal.cross(vertical) == -1


def test_triangle_right_angle_properties():
    triangle = Triangle2D(Point2D(0, 0), Point2D(3, 0), Point2D(0, 4))
    assert triangle.quadrances() == (25, 16, 9)
    assert triangle.area() == 576
    assert triangle.twist() == 12
    assert not triangle.is_degenerate()
    assert 1 in triangle.spreads()


def test_triangle_twist_sign_follows_orientation():
    ccw = Triangle2D.of((0, 0), (1, 0), (0, 1))
    cw = Triangle2D.of((0, 0), (0, 1), (1, 0))
    assert ccw.twist() == 1
    assert cw.twist() == -1
    assert ccw.area() == 4


def test_degenerate_triangle_is_reported_not_corrected():
    triangle = Triangle2D.of((0, 0), (1, 1), (2, 2))
    assert triangle.is_degenerate()
    assert triangle.twist() == 0
    assert triangle.p3 == Point2D(2, 2)


def test_triangle_contains_is_boundary_inclusive():
    triangle = Triangle2D.of((0, 0), (2, 0), (0, 2))
    assert triangle.contains((0, 0))
    assert triangle.contains(Point2D(1, 0))
    assert triangle.contains((0.5, 0.5))
    assert not triangle.contains((2, 2))


def test_triangle3d():
    triangle = Triangle3D.of((0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert triangle.quadrances() == (2, 1, 1)
    assert triangle.area() == 4
    assert triangle.normal() == Vector3D(0, 0, 1)
    assert not triangle.is_degenerate()
    assert Triangle3D.of((0, 0, 0), (1, 1, 1), (2, 2, 2)).is_degenerate()


def test_triangle3d_spreads_are_exact_for_rationals():
    triangle = Triangle3D.of(
        (Fraction(0), Fraction(0), Fraction(0)),
        (Fraction(1), Fraction(0), Fraction(0)),
        (Fraction(0), Fraction(1), Fraction(0)),
    )
    assert triangle.spreads() == (Fraction(1), Fraction(1, 2), Fraction(1, 2))
