"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.table import Table

from ..card import Card, Color, Shading, Shape

_COLOR_STYLES = {
    Color.A: "red",
    Color.B: "green",
    Color.C: "magenta",
}

_SHAPE_SYMBOLS = {
    Shape.OVAL: ("●", "○", "◍"),
    Shape.SQUIGGLE: ("■", "□", "▦"),
    Shape.DIAMOND: ("◆", "◇", "◈"),
}

_SHADING_COLUMN = {
    Shading.SOLID: 0,
    Shading.OUTLINED: 1,
    Shading.STRIPED: 2,
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    symbol = _SHAPE_SYMBOLS[card.shape][_SHADING_COLUMN[card.shading]]
    style = _COLOR_STYLES[card.color]
    return f"[{style}]{symbol * card.count}[/{style}]"


def format_cards(cards: Sequence[Card]) -> str:
    return " ".join(format_card(card) for card in cards)


def card_table(cards: Sequence[Card], *, title: str | None = None) -> Table:
    """Return a table listing each card's index and features."""

    table = Table(title=title, box=box.SIMPLE_HEAVY)
    table.add_column("Index", justify="right")
    table.add_column("Card", justify="center")
    table.add_column("Count", justify="right")
    table.add_column("Shape")
    table.add_column("Color")
    table.add_column("Shading")
    for card in cards:
        table.add_row(
            str(card.index),
            format_card(card),
            str(card.count),
            card.shape.name.lower(),
            card.color.name,
            card.shading.name.lower(),
        )
    return table
