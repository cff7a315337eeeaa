"""Card encoding and match algebra.

A card has four features, each taking one of three values, so it is a
four-element vector of ternary digits (trits). The vector is packed into the
four 8-bit lanes of a 32-bit word. Adding packed words adds the trits lane by
lane without carries (a lane never exceeds ``2 + 2 + 2``), which lets the
match checks below work on all four features at once.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final, Iterable, Iterator

DECK_SIZE: Final[int] = 81
NUM_FEATURES: Final[int] = 4
LANE_BITS: Final[int] = 8
LANE_MASK: Final[int] = 0xFF

# Third trit completing a pair, indexed by the pair's trit sum (0..4).
COMPLETIONS: Final[tuple[int, ...]] = tuple((-total) % 3 for total in range(5))


class Feature(IntEnum):
    """Lane positions of the four features, least significant lane first."""

    COUNT = 0
    SHAPE = 1
    COLOR = 2
    SHADING = 3


class Shape(Enum):
    OVAL = 0
    SQUIGGLE = 1
    DIAMOND = 2


class Color(Enum):
    """Scheme-agnostic color labels; the renderer picks the actual colors."""

    A = 0
    B = 1
    C = 2


class Shading(Enum):
    SOLID = 0
    STRIPED = 1
    OUTLINED = 2


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """Packed card value. Build cards with :func:`encode`."""

    value: int

    @property
    def index(self) -> int:
        """Return the deck index this card was encoded from."""

        return decode(self)

    def feature(self, feature: Feature) -> int:
        """Return the trit stored in ``feature``'s lane, always 0, 1 or 2."""

        return (self.value >> (int(feature) * LANE_BITS)) & LANE_MASK

    @property
    def count(self) -> int:
        """Number of shapes printed on the card, 1 to 3."""

        return self.feature(Feature.COUNT) + 1

    @property
    def shape(self) -> Shape:
        return Shape(self.feature(Feature.SHAPE))

    @property
    def color(self) -> Color:
        return Color(self.feature(Feature.COLOR))

    @property
    def shading(self) -> Shading:
        return Shading(self.feature(Feature.SHADING))

    def trits(self) -> tuple[int, int, int, int]:
        return (
            self.feature(Feature.COUNT),
            self.feature(Feature.SHAPE),
            self.feature(Feature.COLOR),
            self.feature(Feature.SHADING),
        )

    def __repr__(self) -> str:
        return f"Card({decode(self)})"


def encode(index: int) -> Card:
    """Encode a deck index in ``[0, 81)`` into a :class:`Card`.

    The index is converted to base 3 and each trit is packed into its own
    lane. The least significant trit ends up in the most significant lane.
    """

    if not 0 <= index < DECK_SIZE:
        raise ValueError(f"card index {index} out of range")
    value = index % 3
    for _ in range(NUM_FEATURES - 1):
        value <<= LANE_BITS
        index //= 3
        value |= index % 3
    return Card(value)


def decode(card: Card) -> int:
    """Map ``card`` back to the index it was encoded from."""

    value = card.value
    result = value & LANE_MASK
    for _ in range(NUM_FEATURES - 1):
        value >>= LANE_BITS
        result = result * 3 + (value & LANE_MASK)
    return result


def full_deck() -> list[Card]:
    """Return all 81 cards in index order."""

    return [encode(index) for index in range(DECK_SIZE)]


def iter_cards(indices: Iterable[int]) -> Iterator[Card]:
    for index in indices:
        yield encode(index)


def is_triple_match(a: Card, b: Card, c: Card) -> bool:
    """Return ``True`` when three distinct cards sum to zero modulo 3 in every lane."""

    if a == b or b == c or a == c:
        return False
    total = a.value + b.value + c.value
    while total:
        if (total & LANE_MASK) % 3:
            return False
        total >>= LANE_BITS
    return True


def complete_pair(a: Card, b: Card) -> Card:
    """Return the card that turns ``a`` and ``b`` into a triple-match.

    The lane-wise sum of the pair selects the missing trit of every feature:

      A | B | A+B | Match
     ---+---+-----+-------
      0 | 0 |   0 |     0
      0 | 1 |   1 |     2
      0 | 2 |   2 |     1
      1 | 1 |   2 |     1
      1 | 2 |   3 |     0
      2 | 2 |   4 |     2

    The lookups are assembled starting from the least significant lane, which
    leaves them in reverse lane order; a byte swap restores the codec layout.
    """

    total = a.value + b.value
    value = COMPLETIONS[total & LANE_MASK]
    for _ in range(NUM_FEATURES - 1):
        value <<= LANE_BITS
        total >>= LANE_BITS
        value |= COMPLETIONS[total & LANE_MASK]
    return Card(int.from_bytes(value.to_bytes(NUM_FEATURES, "big"), "little"))


@dataclass(frozen=True, slots=True)
class Triple:
    """Validated triple-match. Build with :func:`to_triple_match`."""

    cards: tuple[Card, Card, Card]

    def indices(self) -> tuple[int, int, int]:
        a, b, c = self.cards
        return a.index, b.index, c.index


@dataclass(frozen=True, slots=True)
class Quad:
    """Validated quad-match: two pairs sharing the same completing card.

    Either pair is enough for a hint, so both are kept.
    """

    left: tuple[Card, Card]
    right: tuple[Card, Card]

    @property
    def cards(self) -> tuple[Card, Card, Card, Card]:
        return self.left + self.right

    @property
    def completion(self) -> Card:
        return complete_pair(*self.left)

    def indices(self) -> tuple[int, int, int, int]:
        return tuple(card.index for card in self.cards)  # type: ignore[return-value]


def to_triple_match(a: Card, b: Card, c: Card) -> Triple | None:
    if is_triple_match(a, b, c):
        return Triple((a, b, c))
    return None


def to_quad_match(a: Card, b: Card, c: Card, d: Card) -> Quad | None:
    """Return the first pairing of four distinct cards whose completions agree."""

    if len({a, b, c, d}) != 4:
        return None
    for left, right in (((a, b), (c, d)), ((a, c), (b, d)), ((a, d), (b, c))):
        if complete_pair(*left) == complete_pair(*right):
            return Quad(left, right)
    return None


__all__ = [
    "COMPLETIONS",
    "DECK_SIZE",
    "Card",
    "Color",
    "Feature",
    "Quad",
    "Shading",
    "Shape",
    "Triple",
    "complete_pair",
    "decode",
    "encode",
    "full_deck",
    "is_triple_match",
    "iter_cards",
    "to_quad_match",
    "to_triple_match",
]
