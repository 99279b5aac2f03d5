"""Fault-checked twins of the divide-dependent formulas.

Each function checks its denominators against the additive identity (or the
configured ``zero_tolerance``) before dividing and raises
:class:`~rattrig.errors.DivisionByZeroError` instead of producing ``inf``,
``nan`` or a silent zero.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from .config import FaultCheckConfig, resolve_config
from .errors import DivisionByZeroError
from .numbers import is_zero, one_like, zero_like
from .trigonom import (
    Line,
    Point,
    Point3,
    _origin,
    _origin3,
    _sub,
    cosine_law,
    cross,
    dot,
    dot3d,
    quadrance,
    quadrance3d,
    quadrance_from_three_points,
)

logger = logging.getLogger(__name__)


def _check_denominator(value: Any, what: str, config: Optional[FaultCheckConfig]) -> None:
    if is_zero(value, resolve_config(config).zero_tolerance):
        logger.debug("Zero denominator in %s: %r", what, value)
        raise DivisionByZeroError(f"division by zero: {what} is zero")


def safe_spread(v_1: Point, v_2: Point, *, config: Optional[FaultCheckConfig] = None) -> Any:
    """Checked :func:`rattrig.trigonom.spread`; rejects zero vectors."""

    q_1 = quadrance(v_1, _origin(v_1[0]))
    q_2 = quadrance(v_2, _origin(v_2[0]))
    _check_denominator(q_1, "quadrance of first vector", config)
    _check_denominator(q_2, "quadrance of second vector", config)
    dot_product = dot(v_1, v_2)
    return one_like(q_1) - dot_product * dot_product / (q_1 * q_2)


def safe_spread3d(v_1: Point3, v_2: Point3, *, config: Optional[FaultCheckConfig] = None) -> Any:
    q_1 = quadrance3d(v_1, _origin3(v_1[0]))
    q_2 = quadrance3d(v_2, _origin3(v_2[0]))
    _check_denominator(q_1, "quadrance of first vector", config)
    _check_denominator(q_2, "quadrance of second vector", config)
    dot_product = dot3d(v_1, v_2)
    return one_like(q_1) - dot_product * dot_product / (q_1 * q_2)


def safe_dilatation(v_1: Point, v_2: Point, *, config: Optional[FaultCheckConfig] = None) -> Any:
    q_1 = quadrance(v_1, _origin(v_1[0]))
    _check_denominator(q_1, "quadrance of reference vector", config)
    return quadrance(v_2, _origin(v_2[0])) / q_1


def safe_quadrance_from_line(p: Point, l: Line, *, config: Optional[FaultCheckConfig] = None) -> Any:
    normal = quadrance((l[0], l[1]), _origin(l[0]))
    _check_denominator(normal, "line normal quadrance", config)
    temp = l[0] * p[0] + l[1] * p[1] + l[2]
    return temp * temp / normal


def safe_spread_from_line(l_1: Line, l_2: Line, *, config: Optional[FaultCheckConfig] = None) -> Any:
    q_1 = quadrance((l_1[0], l_1[1]), _origin(l_1[0]))
    q_2 = quadrance((l_2[0], l_2[1]), _origin(l_2[0]))
    _check_denominator(q_1, "first line normal quadrance", config)
    _check_denominator(q_2, "second line normal quadrance", config)
    temp = cross((l_1[0], l_1[1]), (l_2[0], l_2[1]))
    return temp * temp / (q_1 * q_2)


def safe_cosine_law(q_1: Any, q_2: Any, q_3: Any, *, config: Optional[FaultCheckConfig] = None) -> Any:
    _check_denominator(q_2, "q_2", config)
    _check_denominator(q_3, "q_3", config)
    return cosine_law(q_1, q_2, q_3)


def safe_spread_from_three_points(
    p_1: Point,
    p_2: Point,
    p_3: Point,
    *,
    config: Optional[FaultCheckConfig] = None,
) -> Tuple[Any, Any, Any]:
    """Checked spreads at the three vertices; coincident vertices are rejected."""

    q_1, q_2, q_3 = quadrance_from_three_points(p_1, p_2, p_3)
    for value, what in ((q_1, "q_1"), (q_2, "q_2"), (q_3, "q_3")):
        _check_denominator(value, what, config)
    return (
        cosine_law(q_1, q_2, q_3),
        cosine_law(q_2, q_1, q_3),
        cosine_law(q_3, q_1, q_2),
    )


def safe_turn(
    p_1: Point,
    p_2: Point,
    p_3: Point,
    *,
    config: Optional[FaultCheckConfig] = None,
) -> Tuple[Any, bool]:
    v_1 = _sub(p_2, p_1)
    v_2 = _sub(p_3, p_2)
    s = safe_spread(v_1, v_2, config=config)
    return s, cross(v_1, v_2) >= zero_like(v_1[0])


__all__ = [
    "safe_cosine_law",
    "safe_dilatation",
    "safe_quadrance_from_line",
    "safe_spread",
    "safe_spread3d",
    "safe_spread_from_line",
    "safe_spread_from_three_points",
    "safe_turn",
]
