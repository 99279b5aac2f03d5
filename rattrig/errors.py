"""Fault taxonomy for the checked formula entry points."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Type


class MathError(Enum):
    """Closed set of faults a checked formula can report."""

    DIVISION_BY_ZERO = "division by zero"
    INVALID_INPUT = "invalid input provided"
    OVERFLOW = "calculation overflow"

    @property
    def description(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class MathFault(ArithmeticError):
    """Raised by checked formulas; ``error`` names the fault category."""

    error: MathError = MathError.INVALID_INPUT

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.error.description)

    @classmethod
    def from_error(cls, error: MathError, message: str = "") -> "MathFault":
        return _FAULTS[error](message)


class DivisionByZeroError(MathFault, ZeroDivisionError):
    error = MathError.DIVISION_BY_ZERO


class InvalidInputError(MathFault, ValueError):
    error = MathError.INVALID_INPUT


class OverflowFault(MathFault, OverflowError):
    error = MathError.OVERFLOW


_FAULTS: Dict[MathError, Type[MathFault]] = {
    MathError.DIVISION_BY_ZERO: DivisionByZeroError,
    MathError.INVALID_INPUT: InvalidInputError,
    MathError.OVERFLOW: OverflowFault,
}


__all__ = [
    "DivisionByZeroError",
    "InvalidInputError",
    "MathError",
    "MathFault",
    "OverflowFault",
]
