from fractions import Fraction

import pytest

from rattrig.validation import (
    are_collinear,
    are_lines_parallel,
    are_lines_perpendicular,
    is_acute_triangle,
    is_obtuse_triangle,
    is_right_triangle,
    is_valid_quadrance,
    is_valid_spread,
    is_valid_triangle,
    point_in_triangle,
    point_on_line,
    satisfies_triangle_inequality,
)


def test_collinear_points_do_not_form_a_triangle():
    assert are_collinear((0, 0), (1, 1), (2, 2))
    assert not is_valid_triangle((0, 0), (1, 1), (2, 2))


def test_non_collinear_points_form_a_triangle():
    assert not are_collinear((0, 0), (1, 0), (0, 1))
    assert is_valid_triangle((0, 0), (1, 0), (0, 1))


@pytest.mark.parametrize('q, expected', [(4, True), (0, True), (-1, False), (Fraction(-1, 3), False)])
def test_is_valid_quadrance(q, expected):
    assert is_valid_quadrance(q) is expected


@pytest.mark.parametrize('s, expected', [(0.0, True), (0.5, True), (1.0, True), (-0.1, False), (1.1, False)])
def test_is_valid_spread(s, expected):
    assert is_valid_spread(s) is expected


@pytest.mark.parametrize(
    'quadrances, expected',
    [
        ((25, 16, 9), True),
        ((1, 1, 1), True),
        ((1, 1, 4), False),  # sides 1, 1, 2 are flat
        ((1, 1, 9), False),
    ],
)
def test_satisfies_triangle_inequality(quadrances, expected):
    assert satisfies_triangle_inequality(*quadrances) is expected


def test_is_right_triangle():
    assert is_right_triangle(1.0, 0.0, 0.0)
    assert is_right_triangle(0.0, 1.0, 0.0)
    assert is_right_triangle(0.0, 0.0, 1.0)
    assert not is_right_triangle(0.3, 0.3, 0.3)


def test_acute_and_obtuse_thresholds():
    assert is_acute_triangle(0.3, 0.3, 0.3)
    assert not is_acute_triangle(1.0, 0.5, 0.5)
    assert is_obtuse_triangle(0.1, 0.2, 0.6)
    assert not is_obtuse_triangle(Fraction(1, 2), Fraction(1, 4), Fraction(1, 4))


def test_line_relations():
    assert are_lines_parallel((1, 1, 0), (2, 2, 1))
    assert not are_lines_parallel((1, 0, 0), (0, 1, 0))
    assert are_lines_perpendicular((1, 0, 0), (0, 1, 0))
    assert not are_lines_perpendicular((1, 1, 0), (2, 2, 1))


def test_point_on_line():
    assert point_on_line((1, 1), (1, -1, 0))
    assert not point_on_line((1, 2), (1, -1, 0))


@pytest.mark.parametrize(
    'point, expected',
    [
        ((0.5, 0.25), True),
        ((0.0, 0.0), True),
        ((0.5, 0.0), True),
        ((0.5, 0.5), True),
        ((1.0, 1.0), False),
        ((-0.1, 0.2), False),
    ],
)
def test_point_in_triangle(point, expected):
    assert point_in_triangle(point, (0.0, 0.0), (1.0, 0.0), (0.0, 1.0)) is expected


def test_point_in_degenerate_triangle_is_never_contained():
    assert not point_in_triangle((1, 1), (0, 0), (1, 1), (2, 2))


def test_point_in_triangle_with_rationals():
    third = Fraction(1, 3)
    assert point_in_triangle((third, third), (0, 0), (1, 0), (0, 1))
