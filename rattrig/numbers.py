"""Numeric capability contract shared by every formula."""

from __future__ import annotations

from typing import Any, Protocol, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")

Pair = Tuple[T, T]
Triple = Tuple[T, T, T]
LineCoefficients = Tuple[T, T, T]


@runtime_checkable
class SupportsRing(Protocol):
    """Addition, subtraction and multiplication (quadrance, cross, dot)."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...


@runtime_checkable
class SupportsField(SupportsRing, Protocol):
    """Ring operations plus division (spread, line formulas, dilatation)."""

    def __truediv__(self, other: Any) -> Any: ...


def zero_like(value: Any) -> Any:
    """Return the additive identity in the type of ``value``."""

    zero = getattr(value, "zero", None)
    if callable(zero):
        return zero()
    return type(value)(0)


def one_like(value: Any) -> Any:
    """Return the multiplicative identity in the type of ``value``."""

    one = getattr(value, "one", None)
    if callable(one):
        return one()
    return type(value)(1)


def four_like(value: Any) -> Any:
    # needs only one() and +
    one = one_like(value)
    return one + one + one + one


def is_zero(value: Any, tolerance: Any = 0) -> bool:
    """Compare ``value`` with the additive identity, optionally within ``tolerance``."""

    if tolerance:
        return abs(value) <= tolerance
    return value == zero_like(value)


__all__ = [
    "LineCoefficients",
    "Pair",
    "SupportsField",
    "SupportsRing",
    "Triple",
    "four_like",
    "is_zero",
    "one_like",
    "zero_like",
]
