"""Generic rational trigonometry formulas.

Every function here uses only ``+``, ``-``, ``*`` and ``/`` of its inputs, so
the same body works for ``int``, ``float``, :class:`fractions.Fraction`,
numpy scalars and the fixed-width adapters in :mod:`rattrig.fixed`. Division
follows the operand type: these are the unchecked entry points, and a zero
denominator surfaces however the type reports it. Callers that cannot
guarantee non-degenerate input should use :mod:`rattrig.safe`.
"""

from __future__ import annotations

from typing import Any, Tuple

from .numbers import four_like, is_zero, one_like, zero_like

Point = Tuple[Any, Any]
Point3 = Tuple[Any, Any, Any]
Line = Tuple[Any, Any, Any]


def _origin(sample: Any) -> Point:
    zero = zero_like(sample)
    return zero, zero


def _origin3(sample: Any) -> Point3:
    zero = zero_like(sample)
    return zero, zero, zero


def _sub(p_1: Point, p_2: Point) -> Point:
    return p_1[0] - p_2[0], p_1[1] - p_2[1]


def archimedes(q_1: Any, q_2: Any, q_3: Any) -> Any:
    """Return the quadrea ``4*q1*q2 - (q1 + q2 - q3)**2``.

    For the quadrances of a real triangle this is 16 times the squared area.
    The constant 4 is built from the type's unit.
    """

    temp = q_1 + q_2 - q_3
    four = four_like(q_1)
    return four * q_1 * q_2 - temp * temp


def quadrance(p_1: Point, p_2: Point) -> Any:
    """Squared distance between two points."""

    dx = p_1[0] - p_2[0]
    dy = p_1[1] - p_2[1]
    return dx * dx + dy * dy


def quadrance3d(p_1: Point3, p_2: Point3) -> Any:
    dx = p_1[0] - p_2[0]
    dy = p_1[1] - p_2[1]
    dz = p_1[2] - p_2[2]
    return dx * dx + dy * dy + dz * dz


def dot(v_1: Point, v_2: Point) -> Any:
    return v_1[0] * v_2[0] + v_1[1] * v_2[1]


def dot3d(v_1: Point3, v_2: Point3) -> Any:
    return v_1[0] * v_2[0] + v_1[1] * v_2[1] + v_1[2] * v_2[2]


def cross(v_1: Point, v_2: Point) -> Any:
    """Signed 2D cross product ``x1*y2 - y1*x2`` (twice the spanned area)."""

    return v_1[0] * v_2[1] - v_1[1] * v_2[0]


def cross3d(v_1: Point3, v_2: Point3) -> Point3:
    """Vector cross product of two 3D vectors."""

    return (
        v_1[1] * v_2[2] - v_1[2] * v_2[1],
        v_1[2] * v_2[0] - v_1[0] * v_2[2],
        v_1[0] * v_2[1] - v_1[1] * v_2[0],
    )


def spread(v_1: Point, v_2: Point) -> Any:
    """Return ``1 - dot**2 / (q1*q2)``, the squared sine between two vectors.

    Undefined when either vector is the zero vector.
    """

    dot_product = dot(v_1, v_2)
    q_1 = quadrance(v_1, _origin(v_1[0]))
    q_2 = quadrance(v_2, _origin(v_2[0]))
    return one_like(q_1) - dot_product * dot_product / (q_1 * q_2)


def spread3d(v_1: Point3, v_2: Point3) -> Any:
    dot_product = dot3d(v_1, v_2)
    q_1 = quadrance3d(v_1, _origin3(v_1[0]))
    q_2 = quadrance3d(v_2, _origin3(v_2[0]))
    return one_like(q_1) - dot_product * dot_product / (q_1 * q_2)


def quadrance_from_line(p: Point, l: Line) -> Any:
    """Squared distance from ``p`` to the line ``a*x + b*y + c = 0``."""

    temp = l[0] * p[0] + l[1] * p[1] + l[2]
    return temp * temp / quadrance((l[0], l[1]), _origin(l[0]))


def spread_from_line(l_1: Line, l_2: Line) -> Any:
    temp = cross((l_1[0], l_1[1]), (l_2[0], l_2[1]))
    q_1 = quadrance((l_1[0], l_1[1]), _origin(l_1[0]))
    q_2 = quadrance((l_2[0], l_2[1]), _origin(l_2[0]))
    return temp * temp / (q_1 * q_2)


def cross_from_line(l_1: Line, l_2: Line) -> Any:
    return cross((l_1[0], l_1[1]), (l_2[0], l_2[1]))


def quadrance_from_three_points(p_1: Point, p_2: Point, p_3: Point) -> Tuple[Any, Any, Any]:
    """Side quadrances, each indexed by the opposite vertex."""

    return (
        quadrance(p_2, p_3),
        quadrance(p_1, p_3),
        quadrance(p_1, p_2),
    )


def quadrance_from_three_points3d(p_1: Point3, p_2: Point3, p_3: Point3) -> Tuple[Any, Any, Any]:
    return (
        quadrance3d(p_2, p_3),
        quadrance3d(p_1, p_3),
        quadrance3d(p_1, p_2),
    )


def cosine_law(q_1: Any, q_2: Any, q_3: Any) -> Any:
    """Spread opposite ``q_1`` in a triangle with quadrances ``q_1, q_2, q_3``."""

    temp = q_2 + q_3 - q_1
    return one_like(q_1) - temp * temp / (four_like(q_1) * q_2 * q_3)


def spreads_from_quadrances(q_1: Any, q_2: Any, q_3: Any) -> Tuple[Any, Any, Any]:
    return (
        cosine_law(q_1, q_2, q_3),
        cosine_law(q_2, q_1, q_3),
        cosine_law(q_3, q_1, q_2),
    )


def spread_from_three_points(p_1: Point, p_2: Point, p_3: Point) -> Tuple[Any, Any, Any]:
    """Spreads at ``p_1``, ``p_2`` and ``p_3``."""

    return spreads_from_quadrances(*quadrance_from_three_points(p_1, p_2, p_3))


def spread_from_three_points3d(p_1: Point3, p_2: Point3, p_3: Point3) -> Tuple[Any, Any, Any]:
    return spreads_from_quadrances(*quadrance_from_three_points3d(p_1, p_2, p_3))


def cross_from_three_points(p_1: Point, p_2: Point, p_3: Point) -> Any:
    """Twist of the triangle: twice its signed area, positive when counter-clockwise."""

    return cross(_sub(p_2, p_1), _sub(p_3, p_1))


def turn(p_1: Point, p_2: Point, p_3: Point) -> Tuple[Any, bool]:
    """Spread between edges ``p1->p2`` and ``p2->p3`` and its orientation.

    The flag is ``True`` for a counter-clockwise turn; a straight continuation
    (zero cross) also reports ``True``.
    """

    v_1 = _sub(p_2, p_1)
    v_2 = _sub(p_3, p_2)
    return spread(v_1, v_2), cross(v_1, v_2) >= zero_like(v_1[0])


def dilatation(v_1: Point, v_2: Point) -> Any:
    """Squared scale factor ``q(v2) / q(v1)``.

    Returns the additive identity when ``v_1`` is the zero vector.
    """

    q_1 = quadrance(v_1, _origin(v_1[0]))
    q_2 = quadrance(v_2, _origin(v_2[0]))
    if is_zero(q_1):
        return zero_like(q_1)
    return q_2 / q_1


def sine_law_product(q: Any, s: Any) -> Any:
    return q * s


def cross_law(q_1: Any, q_2: Any, q_3: Any, s_3: Any) -> Any:
    """Residual of ``(q1 + q2 - q3)**2 = 4*q1*q2*(1 - s3)``; zero for a consistent triangle."""

    temp = q_1 + q_2 - q_3
    return temp * temp - four_like(q_1) * q_1 * q_2 * (one_like(s_3) - s_3)


def triple_spread(s_1: Any, s_2: Any, s_3: Any) -> Any:
    """Residual of the triple spread formula; zero for the spreads of any triangle."""

    one = one_like(s_1)
    two = one + one
    total = s_1 + s_2 + s_3
    return (
        total * total
        - two * (s_1 * s_1 + s_2 * s_2 + s_3 * s_3)
        - four_like(s_1) * s_1 * s_2 * s_3
    )


__all__ = [
    "archimedes",
    "cosine_law",
    "cross",
    "cross3d",
    "cross_from_line",
    "cross_from_three_points",
    "cross_law",
    "dilatation",
    "dot",
    "dot3d",
    "quadrance",
    "quadrance3d",
    "quadrance_from_line",
    "quadrance_from_three_points",
    "quadrance_from_three_points3d",
    "sine_law_product",
    "spread",
    "spread3d",
    "spread_from_line",
    "spread_from_three_points",
    "spread_from_three_points3d",
    "spreads_from_quadrances",
    "triple_spread",
    "turn",
]
