"""Boolean predicates built from the core formulas.

Comparisons are exact (``==``, ``<``, ``>=``) in the input's own type, so
they are decisive for ``int`` and ``Fraction`` and subject to rounding for
``float``.
"""

from __future__ import annotations

from typing import Any

from .numbers import is_zero, one_like, zero_like
from .trigonom import Line, Point, archimedes, cross, cross_from_line, cross_from_three_points, dot


def are_collinear(p_1: Point, p_2: Point, p_3: Point) -> bool:
    """``True`` when ``cross(p2 - p1, p3 - p1)`` is zero."""

    return is_zero(cross_from_three_points(p_1, p_2, p_3))


def is_valid_triangle(p_1: Point, p_2: Point, p_3: Point) -> bool:
    return not are_collinear(p_1, p_2, p_3)


def satisfies_triangle_inequality(q_1: Any, q_2: Any, q_3: Any) -> bool:
    """Strict triangle inequality for the side lengths implied by three quadrances.

    Equivalent to a positive quadrea, which avoids square roots.
    """

    return archimedes(q_1, q_2, q_3) > zero_like(q_1)


def is_valid_quadrance(q: Any) -> bool:
    return q >= zero_like(q)


def is_valid_spread(s: Any) -> bool:
    return zero_like(s) <= s <= one_like(s)


def is_acute_triangle(s_1: Any, s_2: Any, s_3: Any) -> bool:
    one = one_like(s_1)
    return s_1 < one and s_2 < one and s_3 < one


def is_right_triangle(s_1: Any, s_2: Any, s_3: Any) -> bool:
    one = one_like(s_1)
    return s_1 == one or s_2 == one or s_3 == one


def is_obtuse_triangle(s_1: Any, s_2: Any, s_3: Any) -> bool:
    """``True`` when any spread exceeds one half."""

    one = one_like(s_1)
    half = one / (one + one)
    return s_1 > half or s_2 > half or s_3 > half


def are_lines_parallel(l_1: Line, l_2: Line) -> bool:
    return is_zero(cross_from_line(l_1, l_2))


def are_lines_perpendicular(l_1: Line, l_2: Line) -> bool:
    return is_zero(dot((l_1[0], l_1[1]), (l_2[0], l_2[1])))


def point_on_line(point: Point, line: Line) -> bool:
    return is_zero(line[0] * point[0] + line[1] * point[1] + line[2])


def point_in_triangle(point: Point, p_1: Point, p_2: Point, p_3: Point) -> bool:
    """Barycentric containment test, boundary inclusive.

    A degenerate triangle (zero determinant) contains no point.
    """

    x, y = point
    x1, y1 = p_1
    x2, y2 = p_2
    x3, y3 = p_3

    denominator = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    if is_zero(denominator):
        return False

    a = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / denominator
    b = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / denominator
    c = one_like(a) - a - b

    zero = zero_like(a)
    return a >= zero and b >= zero and c >= zero


__all__ = [
    "are_collinear",
    "are_lines_parallel",
    "are_lines_perpendicular",
    "is_acute_triangle",
    "is_obtuse_triangle",
    "is_right_triangle",
    "is_valid_quadrance",
    "is_valid_spread",
    "is_valid_triangle",
    "point_in_triangle",
    "point_on_line",
    "satisfies_triangle_inequality",
]
