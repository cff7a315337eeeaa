"""Exhaustive search for triple- and quad-matches within a group of cards."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Sequence, Union

from .card import Card, Quad, Triple, to_quad_match, to_triple_match
from .completion import completion_rows

Match = Union[Triple, Quad]

TRIPLE_SIZE = 3
QUAD_SIZE = 4


class Iteration(Enum):
    """Signal returned by a visitor to keep searching or stop."""

    CONTINUE = "continue"
    BREAK = "break"


def _foreach_triple(cards: Sequence[Card], visit: Callable[[Triple], Iteration]) -> None:
    n = len(cards)
    for a in range(2, n):
        for b in range(1, a):
            for c in range(b):
                triple = to_triple_match(cards[a], cards[b], cards[c])
                if triple is not None and visit(triple) is Iteration.BREAK:
                    return


def _foreach_quad(cards: Sequence[Card], visit: Callable[[Quad], Iteration]) -> None:
    rows = completion_rows()
    indices = [card.index for card in cards]
    n = len(cards)
    for a in range(3, n):
        row_a = rows[indices[a]]
        for b in range(2, a):
            row_b = rows[indices[b]]
            ab = row_a[indices[b]]
            for c in range(1, b):
                ic = indices[c]
                row_c = rows[ic]
                ac = row_a[ic]
                bc = row_b[ic]
                for d in range(c):
                    id_ = indices[d]
                    # screen with the table, build the witness only on a hit
                    if ab != row_c[id_] and ac != row_b[id_] and row_a[id_] != bc:
                        continue
                    quad = to_quad_match(cards[a], cards[b], cards[c], cards[d])
                    if quad is not None and visit(quad) is Iteration.BREAK:
                        return


def foreach_match(cards: Sequence[Card], size: int, visit: Callable[[Match], Iteration]) -> None:
    """Visit every match of ``size`` cards in traversal order.

    Combinations are walked with descending positions ``a > b > c (> d)``,
    outermost index first, so each combination is seen exactly once.
    """

    if size == TRIPLE_SIZE:
        _foreach_triple(cards, visit)
    elif size == QUAD_SIZE:
        _foreach_quad(cards, visit)
    else:
        raise ValueError(f"unsupported match size {size}; expected 3 or 4")


def find_first_match(cards: Sequence[Card], size: int = TRIPLE_SIZE) -> Match | None:
    first: list[Match] = []

    def visit(match: Match) -> Iteration:
        first.append(match)
        return Iteration.BREAK

    foreach_match(cards, size, visit)
    return first[0] if first else None


def find_all_matches(cards: Sequence[Card], size: int = TRIPLE_SIZE) -> list[Match]:
    found: list[Match] = []

    def visit(match: Match) -> Iteration:
        found.append(match)
        return Iteration.CONTINUE

    foreach_match(cards, size, visit)
    return found


def count_matches(cards: Sequence[Card], size: int = TRIPLE_SIZE) -> int:
    total = 0

    def visit(_: Match) -> Iteration:
        nonlocal total
        total += 1
        return Iteration.CONTINUE

    foreach_match(cards, size, visit)
    return total


def contains_match(cards: Sequence[Card], size: int = TRIPLE_SIZE) -> bool:
    return find_first_match(cards, size) is not None


__all__ = [
    "QUAD_SIZE",
    "TRIPLE_SIZE",
    "Iteration",
    "Match",
    "contains_match",
    "count_matches",
    "find_all_matches",
    "find_first_match",
    "foreach_match",
]
