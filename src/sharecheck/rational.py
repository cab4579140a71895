"""Exact rational arithmetic used for interpolation over the integers."""
from __future__ import annotations

import math

from sharecheck.errors import ConfigurationError


class ExactRational:
    """Immutable fraction kept in lowest terms with a positive denominator."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if denominator == 0:
            raise ConfigurationError("Denominator zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        # gcd(0, d) == d, so zero collapses to 0/1
        g = math.gcd(numerator, denominator)
        self._numerator = numerator // g
        self._denominator = denominator // g

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def add(self, other: ExactRational) -> ExactRational:
        return ExactRational(
            self._numerator * other._denominator + other._numerator * self._denominator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: ExactRational) -> ExactRational:
        return ExactRational(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def __add__(self, other: object) -> ExactRational:
        if isinstance(other, int):
            other = ExactRational(other)
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other: object) -> ExactRational:
        if isinstance(other, int):
            other = ExactRational(other)
        if not isinstance(other, ExactRational):
            return NotImplemented
        return self.multiply(other)

    __radd__ = __add__
    __rmul__ = __mul__

    def is_integer(self) -> bool:
        return self._denominator == 1

    def __int__(self) -> int:
        """Quotient truncated toward zero."""
        quotient = abs(self._numerator) // self._denominator
        return -quotient if self._numerator < 0 else quotient

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ExactRational):
            return (self._numerator, self._denominator) == (other._numerator, other._denominator)
        if isinstance(other, int):
            return self._denominator == 1 and self._numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        # integral values hash like the int they equal
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    def __repr__(self) -> str:
        return f"ExactRational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"


ZERO = ExactRational(0)
ONE = ExactRational(1)


def add(a: ExactRational, b: ExactRational) -> ExactRational:
    return a.add(b)


def multiply(a: ExactRational, b: ExactRational) -> ExactRational:
    return a.multiply(b)


__all__ = ["ExactRational", "ZERO", "ONE", "add", "multiply"]
