"""Vectorised evaluation of the core formulas over many inputs."""

from __future__ import annotations

from typing import Any

import numpy as np

from . import trigonom


def _as_rows(values: Any, width: int) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 2 or array.shape[1] != width:
        raise ValueError(f"expected an array of shape (n, {width}), got {array.shape}")
    return array


def _as_pairs(first: Any, second: Any) -> Any:
    a = np.asarray(first)
    b = np.asarray(second)
    width = a.shape[-1] if a.ndim == 2 else 2
    a = _as_rows(a, width)
    b = _as_rows(b, width)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch: {a.shape} vs {b.shape}")
    return a, b


def quadrances(points_a: Any, points_b: Any) -> np.ndarray:
    """Row-wise quadrance between two ``(n, 2)`` or ``(n, 3)`` arrays."""

    a, b = _as_pairs(points_a, points_b)
    diff = a - b
    return (diff * diff).sum(axis=1)


def crosses(vectors_a: Any, vectors_b: Any) -> np.ndarray:
    a, b = _as_pairs(vectors_a, vectors_b)
    if a.shape[1] != 2:
        raise ValueError("crosses expects 2D vectors")
    return trigonom.cross((a[:, 0], a[:, 1]), (b[:, 0], b[:, 1]))


def spreads(vectors_a: Any, vectors_b: Any) -> np.ndarray:
    """Row-wise spread; rows containing a zero vector give ``nan``/``inf`` for floats."""

    a, b = _as_pairs(vectors_a, vectors_b)
    dots = (a * b).sum(axis=1)
    q_a = (a * a).sum(axis=1)
    q_b = (b * b).sum(axis=1)
    with np.errstate(divide="ignore", invalid="ignore"):
        return 1 - dots * dots / (q_a * q_b)


def archimedes_many(q_1: Any, q_2: Any, q_3: Any) -> np.ndarray:
    a = np.asarray(q_1)
    b = np.asarray(q_2)
    temp = a + b - np.asarray(q_3)
    return 4 * a * b - temp * temp


__all__ = [
    "archimedes_many",
    "crosses",
    "quadrances",
    "spreads",
]
