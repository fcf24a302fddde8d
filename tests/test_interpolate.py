"""Tests for Lagrange interpolation."""

import itertools
from fractions import Fraction

import pytest

from polyshare.config import PRIME
from polyshare.crypto.field import GF
from polyshare.crypto.interpolate import interpolate, lagrange_at, lagrange_at_zero
from polyshare.crypto.point import Point
from polyshare.crypto.polynomial import Polynomial
from polyshare.errors import DuplicateAbscissa, EmptyShareSet, MalformedShareSet


def q(n, d=1):
    return Fraction(n, d)


def test_simple():
    points = [Point(q(1), q(3)), Point(q(4), q(9))]
    assert interpolate(points).render() == "2x + 1"


def test_fractions():
    points = [Point(q(2), q(3)), Point(q(7), q(4))]
    assert interpolate(points).render() == "1/5x + 13/5"


def test_fractional_abscissas():
    points = [(q(1, 2), q(1)), (q(3, 2), q(2))]
    assert interpolate(points).render() == "x + 1/2"


def test_plain_int_tuples():
    assert interpolate([(1, 3), (4, 9)]).render() == "2x + 1"


def test_single_point_is_constant():
    assert interpolate([Point(q(5), q(-2, 3))]).render() == "-2/3"


def test_recovers_known_polynomial():
    p = Polynomial.from_coefficients([72, 101, 108, 108, 111, 33])
    points = [(q(x), p.evaluate(q(x))) for x in (3, 17, 42, 5, 88, 61)]
    assert interpolate(points) == p


def test_lower_degree_than_point_count():
    # Three collinear points give a line, not a quadratic.
    points = [(q(0), q(1)), (q(1), q(3)), (q(2), q(5))]
    result = interpolate(points)
    assert result.degree == 1
    assert result.render() == "2x + 1"


def test_passes_through_points():
    points = [(q(-3), q(7, 2)), (q(0), q(0)), (q(4), q(-1)), (q(9, 5), q(11))]
    p = interpolate(points)
    for x, y in points:
        assert p.evaluate(x) == y


def test_permutation_invariant():
    points = [(q(1), q(4)), (q(2), q(-1, 3)), (q(5), q(8)), (q(7), q(0))]
    expected = interpolate(points)
    for perm in itertools.permutations(points):
        assert interpolate(list(perm)) == expected


def test_empty_raises():
    with pytest.raises(EmptyShareSet):
        interpolate([])
    with pytest.raises(MalformedShareSet):
        lagrange_at_zero([])


def test_duplicate_x_raises():
    with pytest.raises(DuplicateAbscissa):
        interpolate([(q(1), q(2)), (q(1), q(3))])
    with pytest.raises(DuplicateAbscissa):
        interpolate([(q(1), q(2)), (q(2, 2), q(2))])


def test_lagrange_at_matches_polynomial():
    points = [(q(1), q(4)), (q(2), q(-1, 3)), (q(5), q(8))]
    p = interpolate(points)
    for t in (q(0), q(3), q(-7, 2)):
        assert lagrange_at(points, t) == p.evaluate(t)


def test_lagrange_at_zero_is_constant_term():
    points = [(q(2), q(3)), (q(7), q(4))]
    assert lagrange_at_zero(points) == q(13, 5)


# ======================================================================
# Prime field
# ======================================================================


class TestPrimeField:
    def test_interpolate_over_gf(self, rng):
        coeffs = [GF.random(rng) for _ in range(4)]
        p = Polynomial.from_coefficients(coeffs, GF)
        points = [(x, p.evaluate(x)) for x in (1, 2, 3, 4)]
        assert interpolate(points, GF) == p

    def test_constant_term_agrees_with_full_interpolation(self, rng):
        coeffs = [GF.random(rng) for _ in range(5)]
        p = Polynomial.from_coefficients(coeffs, GF)
        points = [(x, p.evaluate(x)) for x in (3, 9, 11, 20, PRIME - 1)]
        full = interpolate(points, GF)
        assert lagrange_at_zero(points, GF) == full.coefficient_at(0) == coeffs[0]

    def test_duplicate_x_mod_p(self):
        with pytest.raises(DuplicateAbscissa):
            lagrange_at_zero([(1, 5), (PRIME + 1, 6)], GF)
