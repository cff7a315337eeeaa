"""Runtime configuration for a game session."""

from __future__ import annotations

import random
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping

from .deck import Deck
from .shuffle import RandomSource
from .variants import Rules, Variant


class DeckKind(str, Enum):
    """Full 81-card deck or the 27-card solid-only beginner deck."""

    FULL = "full"
    SIMPLIFIED = "simplified"


@dataclass(slots=True)
class GameConfig:
    """Selects the variant and deck used for a session."""

    variant: Variant = Variant.SET
    deck: DeckKind = DeckKind.FULL
    seed: int | None = None

    def __post_init__(self) -> None:
        self.variant = Variant(self.variant)
        self.deck = DeckKind(self.deck)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "GameConfig":
        """Build a config from plain values, e.g. ``{"variant": "superset"}``."""

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(values))

    def rules(self) -> Rules:
        return self.variant.rules

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)

    def new_deck(self, rng: RandomSource | None = None) -> Deck:
        """Return a freshly shuffled deck, simplified for the beginner deck."""

        deck = Deck.new(rng if rng is not None else self.make_rng())
        if self.deck is DeckKind.SIMPLIFIED:
            deck.simplify()
        return deck


__all__ = ["DeckKind", "GameConfig"]
