"""Top-level package for the setcore rule engine."""

from . import card, completion, config, deck, find, pairs, shuffle, variants

__all__ = [
    "card",
    "completion",
    "config",
    "deck",
    "find",
    "pairs",
    "shuffle",
    "variants",
]
