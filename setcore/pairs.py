"""Enumerate every unordered pair drawn from a sequence.

A sequence of ``n`` items has ``n * (n - 1) / 2`` pairs. They are produced as
``(items[i], items[j])`` with ``i > j`` in the order
``(1, 0), (2, 0), (2, 1), (3, 0), ...``. Completion-table construction and the
deck fix-up search depend on this order.
"""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")


def iter_index_pairs(n: int) -> Iterator[tuple[int, int]]:
    """Yield ``(i, j)`` for ``0 <= j < i < n``."""

    for i in range(1, n):
        for j in range(i):
            yield i, j


def iter_pairs(items: Sequence[T]) -> Iterator[tuple[T, T]]:
    """Yield every pair of ``items`` in enumeration order."""

    for i, j in iter_index_pairs(len(items)):
        yield items[i], items[j]


def pair_count(n: int) -> int:
    return n * (n - 1) // 2 if n > 1 else 0


__all__ = ["iter_index_pairs", "iter_pairs", "pair_count"]
