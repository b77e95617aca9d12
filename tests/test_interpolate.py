from fractions import Fraction
from itertools import combinations
import random

import pytest
from hypothesis import given, settings, strategies as st

from shamir_recover import DuplicateAbscissa, InsufficientShares, Point, interpolate, lagrange_at, round_half_away


def _points(coeffs, xs):
    out = []
    for x in xs:
        y = 0
        for c in reversed(coeffs):
            y = y * x + c
        out.append(Point(x, y))
    return out


@settings(max_examples=200, deadline=None)
@given(st.data())
def test_integer_polynomial_round_trip(data):
    coeffs = data.draw(st.lists(st.integers(min_value=-(2**256), max_value=2**256), min_size=1, max_size=7))
    xs = data.draw(
        st.lists(st.integers(min_value=1, max_value=10_000), min_size=len(coeffs), max_size=len(coeffs), unique=True)
    )
    points = _points(coeffs, xs)
    exact = lagrange_at(points, 0)
    assert exact == coeffs[0]
    assert interpolate(points) == coeffs[0]


@settings(deadline=None)
@given(st.data())
def test_order_independence(data):
    coeffs = data.draw(st.lists(st.integers(min_value=0, max_value=10**30), min_size=2, max_size=6))
    xs = data.draw(st.lists(st.integers(min_value=1, max_value=500), min_size=len(coeffs), max_size=len(coeffs), unique=True))
    points = _points(coeffs, xs)
    shuffled = data.draw(st.permutations(points))
    assert interpolate(shuffled) == interpolate(points) == coeffs[0]


def test_any_k_subset_gives_same_secret():
    coeffs = [987654321987654321, 17, 0, 5]
    points = _points(coeffs, [1, 2, 3, 5, 8, 13, 21])
    secrets_found = {interpolate(list(subset)) for subset in combinations(points, len(coeffs))}
    assert secrets_found == {coeffs[0]}


def test_evaluates_at_other_abscissa():
    points = _points([3, 0, 1], [1, 2, 3])
    assert lagrange_at(points, 6) == 39
    assert interpolate(points, 10) == 103


def test_single_point_is_constant():
    assert interpolate([Point(7, 42)]) == 42


def test_wide_values_keep_full_precision():
    rng = random.Random(1234)
    coeffs = [rng.getrandbits(512) for _ in range(5)]
    points = _points(coeffs, [2, 4, 9, 11, 30])
    assert interpolate(points) == coeffs[0]


def test_non_integral_result_is_rounded():
    # line through (1, 1) and (3, 2) crosses x=0 at 1/2
    points = [Point(1, 1), Point(3, 2)]
    assert lagrange_at(points) == Fraction(1, 2)
    assert interpolate(points) == 1


def test_negative_non_integral_result_rounds_away_from_zero():
    points = [Point(1, -1), Point(3, -2)]
    assert lagrange_at(points) == Fraction(-1, 2)
    assert interpolate(points) == -1


@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(0), 0),
        (Fraction(5), 5),
        (Fraction(-5), -5),
        (Fraction(1, 2), 1),
        (Fraction(5, 2), 3),
        (Fraction(7, 3), 2),
        (Fraction(8, 3), 3),
        (Fraction(-1, 2), -1),
        (Fraction(-5, 2), -3),
        (Fraction(-12, 5), -2),
        (Fraction(-8, 3), -3),
    ],
)
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_duplicate_abscissa_rejected():
    with pytest.raises(DuplicateAbscissa) as exc:
        interpolate([Point(1, 5), Point(2, 6), Point(1, 7)])
    assert exc.value.x == 1


def test_empty_point_list():
    with pytest.raises(InsufficientShares):
        interpolate([])
