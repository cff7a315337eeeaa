"""Process-wide completion table and table-indexed match counting.

``completion_table()[a, b]`` is the index of the card that completes cards
``a`` and ``b`` into a triple-match. The table is symmetric, its diagonal is
undefined (stored as ``-1``) and it is built once, on first use, from every
pair of the full deck. Once built it is read-only and may be shared freely
between threads.
"""

from __future__ import annotations

import logging
import threading
from typing import Final, Iterable

import numpy as np
from numba import njit

from .card import DECK_SIZE, complete_pair, full_deck
from .pairs import iter_index_pairs

logger = logging.getLogger(__name__)

NO_COMPLETION: Final[int] = -1

_lock = threading.Lock()
_table: np.ndarray | None = None
_rows: tuple[tuple[int, ...], ...] | None = None


def _build_table() -> np.ndarray:
    cards = full_deck()
    table = np.full((DECK_SIZE, DECK_SIZE), NO_COMPLETION, dtype=np.int8)
    for a, b in iter_index_pairs(DECK_SIZE):
        c = complete_pair(cards[a], cards[b]).index
        table[a, b] = c
        # completion is commutative
        table[b, a] = c
    table.setflags(write=False)
    logger.debug("Built %dx%d completion table", DECK_SIZE, DECK_SIZE)
    return table


def _ensure_built() -> tuple[np.ndarray, tuple[tuple[int, ...], ...]]:
    global _table, _rows
    table, rows = _table, _rows
    if table is None or rows is None:
        with _lock:
            if _table is None or _rows is None:
                built = _build_table()
                _rows = tuple(tuple(int(value) for value in row) for row in built)
                _table = built
            table, rows = _table, _rows
    return table, rows


def completion_table() -> np.ndarray:
    """Return the read-only ``(81, 81)`` completion table, building it if needed."""

    return _ensure_built()[0]


def completion_rows() -> tuple[tuple[int, ...], ...]:
    """Return the completion table as nested tuples for fast scalar lookups."""

    return _ensure_built()[1]


def complete_index(a: int, b: int) -> int:
    """Return the index completing card indices ``a`` and ``b``."""

    if a == b:
        raise ValueError("a card cannot complete a pair with itself")
    if not (0 <= a < DECK_SIZE and 0 <= b < DECK_SIZE):
        raise ValueError(f"card indices ({a}, {b}) out of range")
    return completion_rows()[a][b]


@njit(cache=True)
def _count_triples(indices: np.ndarray, table: np.ndarray) -> int:
    n = indices.size
    position = np.full(table.shape[0], -1, dtype=np.int64)
    for k in range(n):
        position[indices[k]] = k
    total = 0
    for a in range(2, n):
        for b in range(1, a):
            c = table[indices[a], indices[b]]
            if c >= 0:
                p = position[c]
                if p >= 0 and p < b:
                    total += 1
    return total


@njit(cache=True)
def _count_quads(indices: np.ndarray, table: np.ndarray) -> int:
    n = indices.size
    total = 0
    for a in range(3, n):
        ia = indices[a]
        for b in range(2, a):
            ib = indices[b]
            ab = table[ia, ib]
            for c in range(1, b):
                ic = indices[c]
                ac = table[ia, ic]
                bc = table[ib, ic]
                for d in range(c):
                    id_ = indices[d]
                    if ab == table[ic, id_] or ac == table[ib, id_] or table[ia, id_] == bc:
                        total += 1
    return total


def _as_index_array(indices: Iterable[int]) -> np.ndarray:
    values = np.asarray(list(indices), dtype=np.int64)
    if values.size and (values.min() < 0 or values.max() >= DECK_SIZE):
        raise ValueError("card indices must lie in [0, 81)")
    if np.unique(values).size != values.size:
        raise ValueError("card indices must be distinct")
    return values


def count_triples_indexed(indices: Iterable[int]) -> int:
    """Count the triple-matches among distinct card indices."""

    values = _as_index_array(indices)
    if values.size < 3:
        return 0
    return int(_count_triples(values, completion_table()))


def count_quads_indexed(indices: Iterable[int]) -> int:
    """Count the quad-matches among distinct card indices."""

    values = _as_index_array(indices)
    if values.size < 4:
        return 0
    return int(_count_quads(values, completion_table()))


__all__ = [
    "NO_COMPLETION",
    "complete_index",
    "completion_rows",
    "completion_table",
    "count_quads_indexed",
    "count_triples_indexed",
]
