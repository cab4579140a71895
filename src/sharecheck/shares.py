"""Share records consumed by the interpolation and consensus layers."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from sharecheck.errors import (
    DuplicateEvaluationPointError,
    DuplicateShareIdError,
    InvalidShareError,
)


@dataclass(frozen=True)
class Share:
    """One point ``(x, y)`` of the sharing polynomial plus its identifier."""

    id: str
    x: int
    y: int

    def __post_init__(self) -> None:
        if self.x == 0:
            raise InvalidShareError(f"Share {self.id!r} is evaluated at x=0")

    @property
    def point(self) -> tuple[int, int]:
        return self.x, self.y


def lift_int_digit_limit() -> None:
    """Allow int <-> str conversion of any length.

    Python 3.11+ caps decimal conversion at 4300 digits by default, which
    share values and recovered secrets routinely exceed.
    """

    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def shares_from_points(points: Iterable[tuple[int, int]]) -> list[Share]:
    """Build shares from bare points, using the decimal x as the id."""

    return [Share(str(x), x, y) for x, y in points]


def ensure_distinct(shares: Sequence[Share]) -> None:
    """Raise if two shares share an id or an evaluation point."""

    seen_ids: set[str] = set()
    seen_x: dict[int, str] = {}
    for share in shares:
        if share.id in seen_ids:
            raise DuplicateShareIdError(f"Share id {share.id!r} appears more than once")
        seen_ids.add(share.id)
        if share.x in seen_x:
            raise DuplicateEvaluationPointError(
                f"Shares {seen_x[share.x]!r} and {share.id!r} both use x={share.x}"
            )
        seen_x[share.x] = share.id


__all__ = ["Share", "shares_from_points", "ensure_distinct", "lift_int_digit_limit"]
