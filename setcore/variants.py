"""Rule sets for the two game variants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Sequence

from .card import Card, Quad
from .find import QUAD_SIZE, TRIPLE_SIZE, contains_match, count_matches, find_first_match
from .shuffle import RandomSource, shuffle


@dataclass(frozen=True, slots=True)
class Rules:
    """Static description of a variant consumed by the game-flow layer.

    ``deal_order`` is a stack of table cell indices: the last entry is filled
    first when dealing.
    """

    name: str
    match_size: int
    initial_deal_size: int
    deal_order: tuple[int, ...]

    def is_valid(self, cards: Sequence[Card]) -> bool:
        """Return ``True`` when the selected ``cards`` form a match."""

        if len(cards) != self.match_size:
            raise ValueError(f"{self.name} selections hold {self.match_size} cards, got {len(cards)}")
        return contains_match(cards, self.match_size)

    def hint(self, cards: Sequence[Card], rng: RandomSource | None = None) -> list[Card] | None:
        """Return two cards belonging to some match, or ``None`` when stuck."""

        # Shuffling randomises both which match is found and the order of
        # the returned pair; otherwise matches early in the layout win.
        shuffled = list(cards)
        shuffle(shuffled, rng)
        match = find_first_match(shuffled, self.match_size)
        if match is None:
            return None
        if isinstance(match, Quad):
            a, b = match.left
        else:
            a, b, _ = match.cards
        return [a, b]

    def is_stuck(self, cards: Sequence[Card]) -> bool:
        return not contains_match(cards, self.match_size)

    def count_matches(self, cards: Sequence[Card]) -> int:
        return count_matches(cards, self.match_size)


#  XX   1   2   3  XX
#   5   6   7   8   9
#  10  11  12  13  14
#  15  16  17  18  19
SET_RULES: Final[Rules] = Rules(
    name="Set",
    match_size=TRIPLE_SIZE,
    initial_deal_size=12,
    deal_order=(19, 14, 9, 15, 10, 5, 18, 17, 16, 13, 12, 11, 8, 7, 6, 3, 2, 1),
)

#  XX   1   2   3  XX
#  XX   6  XX   8  XX
#  XX  11  XX  13  XX
#  XX  16  17  18  XX
SUPERSET_RULES: Final[Rules] = Rules(
    name="SuperSet",
    match_size=QUAD_SIZE,
    initial_deal_size=10,
    deal_order=(18, 17, 16, 13, 11, 8, 6, 3, 2, 1),
)


class Variant(str, Enum):
    """Named variants selectable from configuration."""

    SET = "set"
    SUPERSET = "superset"

    @property
    def rules(self) -> Rules:
        return SET_RULES if self is Variant.SET else SUPERSET_RULES


__all__ = ["Rules", "SET_RULES", "SUPERSET_RULES", "Variant"]
