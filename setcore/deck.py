"""Deck of cards with stack semantics and a set-guaranteeing draw."""

from __future__ import annotations

import logging
from typing import Sequence

from .card import Card, Shading, full_deck
from .completion import complete_index
from .find import contains_match, find_first_match
from .pairs import iter_pairs
from .shuffle import RandomSource, shuffle

logger = logging.getLogger(__name__)

GUARANTEE_HAND_SIZE = 15
GUARANTEE_MIN_STOCK = 6
DRAW_SIZE = 3


class Deck:
    """Undealt stock of cards. The top of the deck is the end of ``stock``."""

    def __init__(self, stock: Sequence[Card] | None = None, rng: RandomSource | None = None) -> None:
        self.stock: list[Card] = list(stock) if stock is not None else []
        self.rng = rng
        self._has_drawn = False

    @classmethod
    def new(cls, rng: RandomSource | None = None) -> "Deck":
        """Return a shuffled deck holding all 81 cards."""

        cards = full_deck()
        shuffle(cards, rng)
        return cls(cards, rng)

    def simplify(self) -> None:
        """Keep only solid cards, the beginner deck.

        Must be called before anything is drawn.
        """

        if self._has_drawn:
            raise RuntimeError("simplify() must be called before the first draw")
        self.stock = [card for card in self.stock if card.shading is Shading.SOLID]

    def is_empty(self) -> bool:
        return not self.stock

    def remainder(self) -> int:
        return len(self.stock)

    def draw(self, n: int) -> list[Card]:
        """Take up to ``n`` cards from the top; fewer when the stock runs out."""

        if n < 0:
            raise ValueError("cannot draw a negative number of cards")
        self._has_drawn = True
        count = min(n, len(self.stock))
        if count == 0:
            return []
        drawn = self.stock[-count:]
        del self.stock[-count:]
        return drawn

    def draw_guaranteeing_set(self, hand: Sequence[Card]) -> list[Card] | None:
        """Draw 3 cards such that ``hand`` plus the draw contains a triple-match.

        The smallest deal certain to contain a triple-match has 21 cards, so a
        15-card table plus a stock of at least 6 always has one among them.
        Three placements of that match need fixing:

        1. two cards on the table, one in the stock: draw the stock card;
        2. one card on the table, two in the stock: draw both stock cards;
        3. all three in the stock: draw all of them.

        A plain draw is tried first and almost always succeeds. ``None`` is
        only returned if no fix exists, which the 21-card bound rules out.
        """

        if len(hand) != GUARANTEE_HAND_SIZE:
            raise ValueError(f"hand must hold {GUARANTEE_HAND_SIZE} cards, got {len(hand)}")
        if len(self.stock) < GUARANTEE_MIN_STOCK:
            raise ValueError(
                f"stock must hold at least {GUARANTEE_MIN_STOCK} cards, got {len(self.stock)}"
            )

        draw = self.draw(DRAW_SIZE)
        if contains_match([*hand, *draw]):
            return draw
        # put the draw back so the stock can be doctored
        self.stock.extend(draw)

        result = self._fix_one_card(hand) or self._fix_two_cards(hand) or self._fix_three_cards()
        if result is None:
            logger.warning(
                "Could not guarantee a set for a %d-card hand with %d cards in stock",
                len(hand),
                len(self.stock),
            )
        return result

    def _fix_one_card(self, hand: Sequence[Card]) -> list[Card] | None:
        # shuffled so cards early in the layout are not favoured
        shuffled = list(hand)
        shuffle(shuffled, self.rng)
        stock_positions = {card.index: position for position, card in enumerate(self.stock)}

        for a, b in iter_pairs(shuffled):
            position = stock_positions.get(complete_index(a.index, b.index))
            if position is None:
                continue
            top = len(self.stock) - 1
            self.stock[position], self.stock[top] = self.stock[top], self.stock[position]
            draw = self.draw(DRAW_SIZE)
            shuffle(draw, self.rng)
            logger.debug("One-card fix moved %r to the top of the stock", draw)
            return draw
        return None

    def _fix_two_cards(self, hand: Sequence[Card]) -> list[Card] | None:
        in_hand = {card.index for card in hand}
        for a, b in iter_pairs(self.stock):
            if complete_index(a.index, b.index) not in in_hand:
                continue
            self.stock = [card for card in self.stock if card != a and card != b]
            result = [a, b, *self.draw(1)]
            shuffle(result, self.rng)
            logger.debug("Two-card fix drew the stock pair %r, %r", a, b)
            return result
        return None

    def _fix_three_cards(self) -> list[Card] | None:
        triple = find_first_match(self.stock)
        if triple is None:
            return None
        found = set(triple.cards)
        self.stock = [card for card in self.stock if card not in found]
        logger.debug("Three-card fix drew %r from the stock", triple)
        return list(triple.cards)


__all__ = ["Deck", "GUARANTEE_HAND_SIZE", "GUARANTEE_MIN_STOCK"]
