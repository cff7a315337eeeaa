"""Fisher-Yates shuffling with an injectable random source."""

from __future__ import annotations

import random
from typing import MutableSequence, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Minimal protocol for the random generators accepted by the engine."""

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int: ...


def shuffle(items: MutableSequence[T], rng: RandomSource | None = None) -> None:
    """Permute ``items`` in place.

    Walks from the end of the sequence, swapping each slot with a uniformly
    chosen slot at or before it. ``rng`` defaults to the module-level
    :mod:`random` generator.
    """

    source = rng if rng is not None else random
    for i in range(len(items) - 1, 0, -1):
        j = source.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


__all__ = ["RandomSource", "shuffle"]
