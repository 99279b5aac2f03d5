from fractions import Fraction

import numpy as np
import pytest

from rattrig import trigonom
from rattrig.bulk import archimedes_many, crosses, quadrances, spreads


def test_quadrances_match_scalar_formula():
    a = np.array([[0, 0], [1, 1], [2, -3]])
    b = np.array([[3, 4], [4, 5], [2, -3]])
    result = quadrances(a, b)
    assert result.tolist() == [25, 25, 0]
    for row_a, row_b, q in zip(a.tolist(), b.tolist(), result.tolist()):
        assert trigonom.quadrance(row_a, row_b) == q


def test_quadrances_in_three_dimensions():
    result = quadrances([[0, 0, 0], [1, 1, 1]], [[1, 2, 2], [1, 1, 1]])
    assert result.tolist() == [9, 0]


def test_crosses_keep_orientation():
    result = crosses([[1, 0], [1, 1], [2, 4]], [[0, 1], [1, 0], [1, 2]])
    assert result.tolist() == [1, -1, 0]


def test_crosses_reject_3d_rows():
    with pytest.raises(ValueError):
        crosses([[1, 0, 0]], [[0, 1, 0]])


def test_spreads_for_floats_and_zero_rows():
    result = spreads(np.array([[1.0, 1.0], [1.0, 0.0], [0.0, 0.0]]), np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 0.0]]))
    assert result[0] == pytest.approx(0.5)
    assert result[1] == pytest.approx(1.0)
    assert np.isnan(result[2])


def test_spreads_stay_exact_for_fraction_objects():
    a = np.array([[Fraction(1), Fraction(2)]], dtype=object)
    b = np.array([[Fraction(3), Fraction(1)]], dtype=object)
    result = spreads(a, b)
    assert result[0] == Fraction(1) - Fraction(25, 50)
    assert result[0] == trigonom.spread((Fraction(1), Fraction(2)), (Fraction(3), Fraction(1)))


def test_archimedes_many():
    result = archimedes_many([1, 25, 1], [2, 16, 1], [3, 9, 4])
    assert result.tolist() == [8, 576, 0]


@pytest.mark.parametrize(
    'first, second',
    [
        ([[0, 0], [1, 1]], [[0, 0]]),
        ([0, 0], [1, 1]),
        ([[0, 0]], [[0, 0, 0]]),
    ],
)
def test_shape_errors(first, second):
    with pytest.raises(ValueError):
        quadrances(first, second)
