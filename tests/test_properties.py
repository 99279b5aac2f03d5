import random
from fractions import Fraction

import pytest

from rattrig import trigonom
from rattrig.fixed import F64, I32, I64, I128, U32, U64, U128
from rattrig.validation import are_collinear

SEEDS = [0, 1, 7, 42]


def _points(rng, count, low=-50, high=50):
    return [(rng.randint(low, high), rng.randint(low, high)) for _ in range(count)]


def _triangles(rng, count):
    found = []
    while len(found) < count:
        p_1, p_2, p_3 = (tuple(Fraction(c) for c in p) for p in _points(rng, 3, -20, 20))
        if not are_collinear(p_1, p_2, p_3):
            found.append((p_1, p_2, p_3))
    return found


@pytest.mark.parametrize('seed', SEEDS)
def test_quadrance_is_symmetric_and_vanishes_on_itself(seed):
    rng = random.Random(seed)
    for a, b in zip(_points(rng, 20), _points(rng, 20)):
        assert trigonom.quadrance(a, a) == 0
        assert trigonom.quadrance(a, b) == trigonom.quadrance(b, a)
        assert trigonom.quadrance(a, b) >= 0


@pytest.mark.parametrize('seed', SEEDS)
def test_cross_is_antisymmetric(seed):
    rng = random.Random(seed)
    for v, w in zip(_points(rng, 20), _points(rng, 20)):
        assert trigonom.cross(v, v) == 0
        assert trigonom.cross(v, w) == -trigonom.cross(w, v)


@pytest.mark.parametrize('seed', SEEDS)
def test_signed_widths_agree_with_generic_formulas(seed):
    rng = random.Random(seed)
    for a, b in zip(_points(rng, 20), _points(rng, 20)):
        expected_q = trigonom.quadrance(a, b)
        expected_c = trigonom.cross(a, b)
        for width in (I32, I64, I128):
            assert width.quadrance(a, b) == expected_q
            assert width.quadrance(a, a) == 0
            assert width.cross(a, b) == expected_c
            assert width.cross(a, a) == 0
        assert F64.quadrance(a, b) == float(expected_q)
        assert F64.cross(a, b) == float(expected_c)


@pytest.mark.parametrize('seed', SEEDS)
def test_unsigned_widths_agree_on_magnitudes(seed):
    rng = random.Random(seed)
    for a, b in zip(_points(rng, 20, 0, 100), _points(rng, 20, 0, 100)):
        expected_q = trigonom.quadrance(a, b)
        expected_c = abs(trigonom.cross(a, b))
        for width in (U32, U64, U128):
            assert width.quadrance(a, b) == expected_q
            assert width.quadrance(b, a) == expected_q
            assert width.cross(a, b) == expected_c


@pytest.mark.parametrize('seed', SEEDS)
def test_rational_triangle_laws(seed):
    rng = random.Random(seed)
    for p_1, p_2, p_3 in _triangles(rng, 10):
        q_1, q_2, q_3 = trigonom.quadrance_from_three_points(p_1, p_2, p_3)
        s_1, s_2, s_3 = trigonom.spreads_from_quadrances(q_1, q_2, q_3)

        assert s_1 / q_1 == s_2 / q_2 == s_3 / q_3
        assert trigonom.cross_law(q_1, q_2, q_3, s_3) == 0
        assert trigonom.triple_spread(s_1, s_2, s_3) == 0
        twist = trigonom.cross_from_three_points(p_1, p_2, p_3)
        assert trigonom.archimedes(q_1, q_2, q_3) == 4 * twist * twist
        assert all(0 <= s <= 1 for s in (s_1, s_2, s_3))
