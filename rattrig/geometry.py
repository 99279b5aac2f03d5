"""Immutable geometric records exposing the formulas as methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from . import trigonom, validation
from .numbers import is_zero


@dataclass(frozen=True)
class Point2D:
    x: Any
    y: Any

    @classmethod
    def of(cls, coords: Sequence[Any]) -> "Point2D":
        x, y = coords
        return cls(x, y)

    def as_tuple(self) -> Tuple[Any, Any]:
        return self.x, self.y

    def quadrance(self, other: "Point2D") -> Any:
        return trigonom.quadrance(self.as_tuple(), _coords(other))


@dataclass(frozen=True)
class Point3D:
    x: Any
    y: Any
    z: Any

    @classmethod
    def of(cls, coords: Sequence[Any]) -> "Point3D":
        x, y, z = coords
        return cls(x, y, z)

    def as_tuple(self) -> Tuple[Any, Any, Any]:
        return self.x, self.y, self.z

    def quadrance(self, other: "Point3D") -> Any:
        return trigonom.quadrance3d(self.as_tuple(), _coords(other))


@dataclass(frozen=True)
class Vector2D:
    """Displacement with the same layout as :class:`Point2D`."""

    x: Any
    y: Any

    @classmethod
    def of(cls, coords: Sequence[Any]) -> "Vector2D":
        x, y = coords
        return cls(x, y)

    @classmethod
    def from_point(cls, point: Point2D) -> "Vector2D":
        return cls(point.x, point.y)

    def as_tuple(self) -> Tuple[Any, Any]:
        return self.x, self.y

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def quadrance(self) -> Any:
        return trigonom.dot(self.as_tuple(), self.as_tuple())

    def dot(self, other: "Vector2D") -> Any:
        return trigonom.dot(self.as_tuple(), _coords(other))

    def cross(self, other: "Vector2D") -> Any:
        return trigonom.cross(self.as_tuple(), _coords(other))

    def spread(self, other: "Vector2D") -> Any:
        return trigonom.spread(self.as_tuple(), _coords(other))

    def dilatation(self, other: "Vector2D") -> Any:
        return trigonom.dilatation(self.as_tuple(), _coords(other))


@dataclass(frozen=True)
class Vector3D:
    x: Any
    y: Any
    z: Any

    @classmethod
    def of(cls, coords: Sequence[Any]) -> "Vector3D":
        x, y, z = coords
        return cls(x, y, z)

    @classmethod
    def from_point(cls, point: Point3D) -> "Vector3D":
        return cls(point.x, point.y, point.z)

    def as_tuple(self) -> Tuple[Any, Any, Any]:
        return self.x, self.y, self.z

    def __add__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def quadrance(self) -> Any:
        return trigonom.dot3d(self.as_tuple(), self.as_tuple())

    def dot(self, other: "Vector3D") -> Any:
        return trigonom.dot3d(self.as_tuple(), _coords(other))

    def cross(self, other: "Vector3D") -> "Vector3D":
        return Vector3D.of(trigonom.cross3d(self.as_tuple(), _coords(other)))

    def spread(self, other: "Vector3D") -> Any:
        return trigonom.spread3d(self.as_tuple(), _coords(other))


@dataclass(frozen=True)
class Line2D:
    """Line ``a*x + b*y + c = 0``; ``(a, b)`` must not both be zero."""

    a: Any
    b: Any
    c: Any

    @classmethod
    def of(cls, coeffs: Sequence[Any]) -> "Line2D":
        a, b, c = coeffs
        return cls(a, b, c)

    @classmethod
    def through(cls, p_1: Any, p_2: Any) -> "Line2D":
        """Line through two points (tuples or :class:`Point2D`)."""

        x1, y1 = _coords(p_1)
        x2, y2 = _coords(p_2)
        return cls(y1 - y2, x2 - x1, x1 * y2 - x2 * y1)

    def as_tuple(self) -> Tuple[Any, Any, Any]:
        return self.a, self.b, self.c

    def quadrance_to(self, point: Any) -> Any:
        return trigonom.quadrance_from_line(_coords(point), self.as_tuple())

    def spread(self, other: "Line2D") -> Any:
        return trigonom.spread_from_line(self.as_tuple(), _coords(other))

    def cross(self, other: "Line2D") -> Any:
        return trigonom.cross_from_line(self.as_tuple(), _coords(other))

    def is_parallel(self, other: "Line2D") -> bool:
        return validation.are_lines_parallel(self.as_tuple(), _coords(other))

    def is_perpendicular(self, other: "Line2D") -> bool:
        return validation.are_lines_perpendicular(self.as_tuple(), _coords(other))

    def contains(self, point: Any) -> bool:
        return validation.point_on_line(_coords(point), self.as_tuple())


@dataclass(frozen=True)
class Triangle2D:
    p1: Point2D
    p2: Point2D
    p3: Point2D

    @classmethod
    def of(cls, p_1: Sequence[Any], p_2: Sequence[Any], p_3: Sequence[Any]) -> "Triangle2D":
        return cls(Point2D.of(p_1), Point2D.of(p_2), Point2D.of(p_3))

    def _vertices(self):
        return _coords(self.p1), _coords(self.p2), _coords(self.p3)

    def quadrances(self) -> Tuple[Any, Any, Any]:
        return trigonom.quadrance_from_three_points(*self._vertices())

    def spreads(self) -> Tuple[Any, Any, Any]:
        return trigonom.spread_from_three_points(*self._vertices())

    def area(self) -> Any:
        """Quadrea: 16 times the squared area."""

        return trigonom.archimedes(*self.quadrances())

    def twist(self) -> Any:
        """Twice the signed area; positive for counter-clockwise vertices."""

        return trigonom.cross_from_three_points(*self._vertices())

    def is_degenerate(self) -> bool:
        return is_zero(self.twist())

    def contains(self, point: Any) -> bool:
        return validation.point_in_triangle(_coords(point), *self._vertices())


@dataclass(frozen=True)
class Triangle3D:
    p1: Point3D
    p2: Point3D
    p3: Point3D

    @classmethod
    def of(cls, p_1: Sequence[Any], p_2: Sequence[Any], p_3: Sequence[Any]) -> "Triangle3D":
        return cls(Point3D.of(p_1), Point3D.of(p_2), Point3D.of(p_3))

    def _vertices(self):
        return _coords(self.p1), _coords(self.p2), _coords(self.p3)

    def quadrances(self) -> Tuple[Any, Any, Any]:
        return trigonom.quadrance_from_three_points3d(*self._vertices())

    def spreads(self) -> Tuple[Any, Any, Any]:
        return trigonom.spread_from_three_points3d(*self._vertices())

    def area(self) -> Any:
        return trigonom.archimedes(*self.quadrances())

    def normal(self) -> Vector3D:
        p_1, p_2, p_3 = (Vector3D.of(vertex) for vertex in self._vertices())
        return (p_2 - p_1).cross(p_3 - p_1)

    def is_degenerate(self) -> bool:
        return all(is_zero(component) for component in self.normal().as_tuple())


def _coords(value: Any) -> Tuple[Any, ...]:
    as_tuple = getattr(value, "as_tuple", None)
    if callable(as_tuple):
        return as_tuple()
    return tuple(value)


__all__ = [
    "Line2D",
    "Point2D",
    "Point3D",
    "Triangle2D",
    "Triangle3D",
    "Vector2D",
    "Vector3D",
]
