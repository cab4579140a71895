"""Plurality-vote reconstruction that singles out corrupted shares.

Every k-subset of the supplied shares is interpolated at x=0 and the subsets
are grouped by the exact rational value they produce. The value backed by the
most subsets wins and is reported as an integer (truncated toward zero); any
share that never took part in a winning subset is reported as corrupt.

When several values tie for the largest tally the one produced first in
enumeration order wins. With ``n == k`` there is a single subset, so no share
can ever be reported as corrupt.

Integrality is not checked by default: a corrupted subset whose result happens
to reduce to the honest integer is indistinguishable from an honest one, and a
non-integral value can still win a plurality. ``strict`` mode drops
non-integral subsets before tallying instead.
"""
from __future__ import annotations

import functools
import logging
import math
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

import sharecheck.policy as policy_config
from sharecheck.errors import (
    InsufficientSharesError,
    NoConsensusError,
    SearchSpaceTooLargeError,
)
from sharecheck.interpolate import lagrange_at_zero_exact
from sharecheck.policy import ResolverPolicy
from sharecheck.rational import ExactRational
from sharecheck.shares import Share, ensure_distinct, lift_int_digit_limit
from sharecheck.subsets import SubsetEnumerator

_logger = logging.getLogger(__name__)

Subset = tuple[Share, ...]
SecretTally = Mapping[ExactRational, tuple[Subset, ...]]


@dataclass(frozen=True)
class Result:
    """Outcome of a consensus search."""

    secret: int
    corrupt_ids: tuple[str, ...]
    validated_ids: tuple[str, ...]
    support: int
    subsets_examined: int

    @property
    def has_corruption(self) -> bool:
        return bool(self.corrupt_ids)

    def as_dict(self) -> dict:
        lift_int_digit_limit()
        return {
            "secret": str(self.secret),
            "corrupt_ids": list(self.corrupt_ids),
            "validated_ids": list(self.validated_ids),
            "support": self.support,
            "subsets_examined": self.subsets_examined,
        }


def _evaluate(subset: Subset, *, strict: bool) -> Optional[ExactRational]:
    value = lagrange_at_zero_exact(subset)
    if strict and not value.is_integer():
        return None
    return value


def tally_secrets(candidates: Iterable[tuple[Optional[ExactRational], Subset]]) -> SecretTally:
    """Group subsets by the value they produced, skipping rejected ones.

    Keys keep the order in which each value was first produced.
    """

    buckets: dict[ExactRational, list[Subset]] = {}
    for value, subset in candidates:
        if value is None:
            continue
        buckets.setdefault(value, []).append(subset)
    return MappingProxyType({value: tuple(subsets) for value, subsets in buckets.items()})


def pick_winner(tally: SecretTally) -> tuple[ExactRational, tuple[Subset, ...]]:
    """Return the value with the largest tally; ties go to the first seen."""

    if not tally:
        raise NoConsensusError("No subset produced an integral secret")
    best = max(len(subsets) for subsets in tally.values())
    leaders = [value for value, subsets in tally.items() if len(subsets) == best]
    if len(leaders) > 1:
        _logger.warning(
            "Tie between %d candidate secrets with %d subsets each; keeping the first seen",
            len(leaders),
            best,
        )
    return leaders[0], tally[leaders[0]]


class ConsensusResolver:
    """Reconstruct a secret from shares that may include corrupted ones."""

    def __init__(self, policy: ResolverPolicy | None = None) -> None:
        self.policy = policy or policy_config.policy

    def _values(self, subsets: SubsetEnumerator[Share]) -> Iterable[Optional[ExactRational]]:
        evaluate = functools.partial(_evaluate, strict=self.policy.strict)
        if self.policy.workers <= 1 or len(subsets) < 2:
            return map(evaluate, subsets)
        chunksize = max(1, len(subsets) // (self.policy.workers * 4))
        # map() keeps enumeration order, which the tie-break relies on
        with ProcessPoolExecutor(max_workers=self.policy.workers) as executor:
            return list(executor.map(evaluate, subsets, chunksize=chunksize))

    def solve(self, shares: Sequence[Share], k: int) -> Result:
        shares = list(shares)
        if k < 1:
            raise InsufficientSharesError(f"Threshold must be at least 1, got {k}")
        if len(shares) < k:
            raise InsufficientSharesError(
                f"Not enough shares. Need {k}, got {len(shares)}"
            )
        ensure_distinct(shares)

        total = math.comb(len(shares), k)
        if total > self.policy.max_subsets:
            raise SearchSpaceTooLargeError(
                f"C({len(shares)}, {k}) = {total} subsets exceeds the limit of "
                f"{self.policy.max_subsets}"
            )
        _logger.info("Examining %d subsets of %d shares with threshold %d", total, len(shares), k)

        # candidates are logged in decimal
        lift_int_digit_limit()
        subsets = SubsetEnumerator(shares, k)
        tally = tally_secrets(zip(self._values(subsets), subsets))
        for candidate, backing in tally.items():
            _logger.debug("Candidate secret %s backed by %d subsets", candidate, len(backing))

        value, winning = pick_winner(tally)
        validated = {share.id for subset in winning for share in subset}
        validated_ids = tuple(share.id for share in shares if share.id in validated)
        corrupt_ids = tuple(share.id for share in shares if share.id not in validated)
        if corrupt_ids:
            _logger.info("Shares inconsistent with consensus: %s", ", ".join(corrupt_ids))
        return Result(
            secret=int(value),
            corrupt_ids=corrupt_ids,
            validated_ids=validated_ids,
            support=len(winning),
            subsets_examined=total,
        )


def solve(shares: Sequence[Share], k: int, *, policy: ResolverPolicy | None = None) -> Result:
    """Recover the plurality secret from ``shares`` with threshold ``k``."""

    return ConsensusResolver(policy).solve(shares, k)


__all__ = [
    "ConsensusResolver",
    "Result",
    "SecretTally",
    "pick_winner",
    "solve",
    "tally_secrets",
]
