"""Fixed-width specializations of the core formulas.

The formulas are not duplicated per type. Each :class:`FixedWidth` runs the
generic bodies from :mod:`rattrig.trigonom` over operands carrying the
width's arithmetic:

* signed integers wrap around in two's complement and divide toward zero,
* unsigned integers replace subtraction with the absolute difference, so
  ``cross`` becomes the absolute difference of the two cross terms and loses
  orientation,
* ``F64`` is IEEE binary64 via numpy, where division by zero gives
  ``inf``/``nan`` instead of raising.

Integer division by zero raises :class:`ZeroDivisionError`, as a machine
integer division would trap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

import numpy as np

from . import trigonom
from .errors import InvalidInputError, OverflowFault


class _Word:
    """Integer operand that applies a :class:`FixedWidth`'s arithmetic."""

    __slots__ = ("value", "width")

    def __init__(self, value: int, width: "FixedWidth") -> None:
        self.value = value
        self.width = width

    def _make(self, value: int) -> "_Word":
        return _Word(self.width.wrap(value), self.width)

    def _other(self, other: Any) -> int:
        if isinstance(other, _Word):
            return other.value
        return int(other)

    def zero(self) -> "_Word":
        return _Word(0, self.width)

    def one(self) -> "_Word":
        return _Word(1, self.width)

    def __add__(self, other: Any) -> "_Word":
        return self._make(self.value + self._other(other))

    def __sub__(self, other: Any) -> "_Word":
        rhs = self._other(other)
        if not self.width.signed:
            return _Word(abs(self.value - rhs), self.width)
        return self._make(self.value - rhs)

    def __mul__(self, other: Any) -> "_Word":
        return self._make(self.value * self._other(other))

    def __truediv__(self, other: Any) -> "_Word":
        rhs = self._other(other)
        if rhs == 0:
            raise ZeroDivisionError(f"{self.width.name} division by zero")
        quotient = abs(self.value) // abs(rhs)
        if (self.value < 0) != (rhs < 0):
            quotient = -quotient
        return self._make(quotient)

    def __abs__(self) -> "_Word":
        return self._make(abs(self.value))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (_Word, int, np.integer)):
            return self.value == self._other(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: Any) -> bool:
        return self.value < self._other(other)

    def __le__(self, other: Any) -> bool:
        return self.value <= self._other(other)

    def __gt__(self, other: Any) -> bool:
        return self.value > self._other(other)

    def __ge__(self, other: Any) -> bool:
        return self.value >= self._other(other)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"{self.width.name}({self.value})"


@dataclass(frozen=True)
class FixedWidth:
    """One concrete machine representation and its formula entry points."""

    name: str
    bits: int
    signed: bool
    floating: bool = False
    dtype: Optional[type] = None

    @property
    def min(self) -> int:
        if self.dtype is not None and not self.floating:
            return int(np.iinfo(self.dtype).min)
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        if self.dtype is not None and not self.floating:
            return int(np.iinfo(self.dtype).max)
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def wrap(self, value: int) -> int:
        modulus = 1 << self.bits
        value %= modulus
        if self.signed and value > self.max:
            value -= modulus
        return value

    def coerce(self, value: Any) -> Any:
        """Convert ``value`` to this width's scalar type.

        Raises :class:`~rattrig.errors.InvalidInputError` for non-integral
        values on integer widths and :class:`~rattrig.errors.OverflowFault`
        for values outside the representable range.
        """

        if self.floating:
            return np.float64(value)
        integral = int(value)
        if integral != value:
            raise InvalidInputError(f"{self.name} requires an integral value, got {value!r}")
        if not self.min <= integral <= self.max:
            raise OverflowFault(f"{value!r} is out of range for {self.name}")
        return self._scalar(integral)

    def _scalar(self, value: int) -> Any:
        if self.dtype is None:
            return value
        return self.dtype(value)

    def _operand(self, value: Any) -> Any:
        coerced = self.coerce(value)
        if self.floating:
            return coerced
        return _Word(int(coerced), self)

    def _operands(self, values: Iterable[Any]) -> Tuple[Any, ...]:
        return tuple(self._operand(value) for value in values)

    def _result(self, value: Any) -> Any:
        if isinstance(value, tuple):
            return tuple(self._result(item) for item in value)
        if isinstance(value, _Word):
            return self._scalar(value.value)
        return value

    def _apply(self, formula: Callable[..., Any], *args: Iterable[Any]) -> Any:
        operands = [self._operands(arg) for arg in args]
        if self.floating:
            with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
                return self._result(formula(*operands))
        return self._result(formula(*operands))

    def quadrance(self, p_1, p_2):
        return self._apply(trigonom.quadrance, p_1, p_2)

    def quadrance3d(self, p_1, p_2):
        return self._apply(trigonom.quadrance3d, p_1, p_2)

    def cross(self, v_1, v_2):
        return self._apply(trigonom.cross, v_1, v_2)

    def archimedes(self, q_1, q_2, q_3):
        return self._apply(lambda q: trigonom.archimedes(*q), (q_1, q_2, q_3))

    def spread(self, v_1, v_2):
        """Spread between two vectors.

        Integer widths return ``q1*q2 - dot**2 / (q1*q2)`` under integer
        division rather than the fractional spread, e.g. ``2`` for
        ``(1, 1), (1, 0)`` where ``F64`` gives ``0.5``.
        """

        if self.floating:
            return self._apply(trigonom.spread, v_1, v_2)
        return self._apply(_integer_spread, v_1, v_2)

    def quadrance_from_line(self, p, l):
        return self._apply(trigonom.quadrance_from_line, p, l)

    def spread_from_line(self, l_1, l_2):
        return self._apply(trigonom.spread_from_line, l_1, l_2)

    def cross_from_line(self, l_1, l_2):
        return self._apply(trigonom.cross_from_line, l_1, l_2)

    def quadrance_from_three_points(self, p_1, p_2, p_3):
        return self._apply(trigonom.quadrance_from_three_points, p_1, p_2, p_3)

    def spread_from_three_points(self, p_1, p_2, p_3):
        return self._apply(trigonom.spread_from_three_points, p_1, p_2, p_3)

    def cross_from_three_points(self, p_1, p_2, p_3):
        return self._apply(trigonom.cross_from_three_points, p_1, p_2, p_3)


def _integer_spread(v_1, v_2):
    zero = v_1[0].zero()
    q_1 = trigonom.quadrance(v_1, (zero, zero))
    q_2 = trigonom.quadrance(v_2, (zero, zero))
    dot_product = trigonom.dot(v_1, v_2)
    denominator = q_1 * q_2
    return denominator - dot_product * dot_product / denominator


I32 = FixedWidth("i32", 32, signed=True, dtype=np.int32)
I64 = FixedWidth("i64", 64, signed=True, dtype=np.int64)
I128 = FixedWidth("i128", 128, signed=True)
U32 = FixedWidth("u32", 32, signed=False, dtype=np.uint32)
U64 = FixedWidth("u64", 64, signed=False, dtype=np.uint64)
U128 = FixedWidth("u128", 128, signed=False)
F64 = FixedWidth("f64", 64, signed=True, floating=True, dtype=np.float64)

WIDTHS: Dict[str, FixedWidth] = {
    width.name: width for width in (I32, I64, I128, U32, U64, U128, F64)
}


def get_width(name: str) -> FixedWidth:
    try:
        return WIDTHS[name.lower()]
    except KeyError:
        raise KeyError(f"unknown width {name!r}; expected one of {sorted(WIDTHS)}") from None


__all__ = [
    "F64",
    "FixedWidth",
    "I128",
    "I32",
    "I64",
    "U128",
    "U32",
    "U64",
    "WIDTHS",
    "get_width",
]
