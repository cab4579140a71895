"""Deterministic enumeration of k-element share subsets."""
from __future__ import annotations

import itertools
import math
from typing import Generic, Iterator, Sequence, TypeVar

T = TypeVar("T")


class SubsetEnumerator(Generic[T]):
    """All ``C(n, k)`` combinations of ``items`` in lexicographic index order.

    Each iteration starts from scratch and yields fresh tuples, so the
    enumerator can be walked any number of times, also concurrently.
    """

    def __init__(self, items: Sequence[T], k: int) -> None:
        if k < 0:
            raise ValueError("k must be non-negative")
        self._items = tuple(items)
        self.k = k

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        for indices in self.indices():
            yield tuple(self._items[i] for i in indices)

    def __len__(self) -> int:
        return math.comb(len(self._items), self.k)

    def indices(self) -> Iterator[tuple[int, ...]]:
        """Yield index tuples into the original sequence."""
        return itertools.combinations(range(len(self._items)), self.k)


def k_subsets(items: Sequence[T], k: int) -> Iterator[tuple[T, ...]]:
    return iter(SubsetEnumerator(items, k))


__all__ = ["SubsetEnumerator", "k_subsets"]
