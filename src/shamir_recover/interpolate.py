# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation over the rationals.

``lagrange_at``
    Evaluate the unique polynomial of degree ``len(points) - 1`` through the
    given points at an arbitrary abscissa, returning an exact ``Fraction``.

``round_half_away``
    Convert a ``Fraction`` to the nearest integer, halves rounded away from
    zero.

``interpolate``
    Both of the above; this is what reconstruction calls with ``x=0``.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Sequence

from .errors import DuplicateAbscissa, InsufficientShares
from .models import Point


def _check_distinct(points: Sequence[Point]) -> None:
    seen: set[int] = set()
    for p in points:
        if p.x in seen:
            raise DuplicateAbscissa(p.x)
        seen.add(p.x)


def lagrange_at(points: Sequence[Point], x: int = 0) -> Fraction:
    """Evaluate the interpolating polynomial through ``points`` at ``x``."""
    if not points:
        raise InsufficientShares(required=1, available=0)
    _check_distinct(points)

    total = Fraction(0)
    for i, pi in enumerate(points):
        term = Fraction(pi.y)
        for j, pj in enumerate(points):
            if i == j:
                continue
            term *= Fraction(x - pj.x, pi.x - pj.x)
        total += term
    return total


def round_half_away(value: Fraction) -> int:
    """Round ``value`` to the nearest integer, ties away from zero.

    2.5 -> 3, -2.5 -> -3, -2.4 -> -2.
    """
    num, den = value.numerator, value.denominator
    q, r = divmod(abs(num), den)
    if 2 * r >= den:
        q += 1
    return -q if num < 0 else q


def interpolate(points: Sequence[Point], x: int = 0) -> int:
    """Return the integer-rounded value at ``x`` of the polynomial through ``points``."""
    return round_half_away(lagrange_at(points, x))


__all__ = ["lagrange_at", "round_half_away", "interpolate"]
