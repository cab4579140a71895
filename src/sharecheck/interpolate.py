"""Lagrange interpolation at x=0 with exact rational arithmetic.

Shares here live over the integers rather than a prime field, so every
intermediate quotient is kept as an :class:`~sharecheck.rational.ExactRational`
instead of a modular inverse. The accumulated value reduces to an integer when
the points really are samples of one integer polynomial; otherwise it is
truncated and consensus decides whether the subset is trustworthy.
"""
from __future__ import annotations

from typing import Sequence, Union

from sharecheck.errors import DuplicateEvaluationPointError
from sharecheck.rational import ZERO, ExactRational
from sharecheck.shares import Share

Point = Union[Share, tuple[int, int]]


def _coords(points: Sequence[Point]) -> list[tuple[int, int]]:
    return [p.point if isinstance(p, Share) else (p[0], p[1]) for p in points]


def lagrange_at_zero_exact(points: Sequence[Point]) -> ExactRational:
    """Return the interpolating polynomial's value at x=0 as a rational."""

    coords = _coords(points)
    secret = ZERO
    for j, (xj, yj) in enumerate(coords):
        term = ExactRational(yj)
        for m, (xm, _) in enumerate(coords):
            if m == j:
                continue
            if xm == xj:
                raise DuplicateEvaluationPointError(f"Two points share x={xj}")
            term = term.multiply(ExactRational(xm, xm - xj))
        secret = secret.add(term)
    return secret


def lagrange_at_zero(points: Sequence[Point]) -> int:
    """Recover the constant term from ``points``, truncating toward zero."""

    return int(lagrange_at_zero_exact(points))


__all__ = ["Point", "lagrange_at_zero", "lagrange_at_zero_exact"]
