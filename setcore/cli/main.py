"""Typer entry-point wiring for the setcore CLI."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from .. import card, completion, find
from ..config import DeckKind, GameConfig
from ..variants import Variant
from .render import card_table, format_card, format_cards

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _cards_from_indices(indices: List[int]) -> list[card.Card]:
    try:
        cards = [card.encode(index) for index in indices]
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if len(set(indices)) != len(indices):
        raise typer.BadParameter("card indices must be distinct")
    return cards


@app.command()
def show(indices: List[int] = typer.Argument(..., help="Card indices in [0, 81).")) -> None:
    """Describe the features of each card."""

    console.print(card_table(_cards_from_indices(indices)))


@app.command()
def check(indices: List[int] = typer.Argument(..., help="Three or four card indices.")) -> None:
    """Check whether the cards form a triple- or quad-match."""

    cards = _cards_from_indices(indices)
    if len(cards) == find.TRIPLE_SIZE:
        triple = card.to_triple_match(*cards)
        if triple is None:
            console.print(f"{format_cards(cards)} [red]is not a set[/red]")
            raise typer.Exit(code=1)
        console.print(f"{format_cards(cards)} [green]is a set[/green]")
    elif len(cards) == find.QUAD_SIZE:
        quad = card.to_quad_match(*cards)
        if quad is None:
            console.print(f"{format_cards(cards)} [red]is not a superset[/red]")
            raise typer.Exit(code=1)
        console.print(
            f"{format_cards(cards)} [green]is a superset[/green]: "
            f"{format_cards(quad.left)} | {format_cards(quad.right)} "
            f"complete with {format_card(quad.completion)} (#{quad.completion.index})"
        )
    else:
        raise typer.BadParameter("expected 3 or 4 card indices")


@app.command("find")
def find_cli(
    indices: Optional[List[int]] = typer.Argument(None, help="Card indices; the full deck when omitted."),
    variant: Variant = typer.Option(Variant.SET, help="Variant whose matches are searched."),
    limit: int = typer.Option(10, min=0, help="Maximum number of matches to list."),
) -> None:
    """List the matches among a group of cards."""

    cards = _cards_from_indices(indices) if indices else card.full_deck()
    size = variant.rules.match_size
    shown: list[find.Match] = []

    def visit(match: find.Match) -> find.Iteration:
        shown.append(match)
        return find.Iteration.BREAK if len(shown) >= limit else find.Iteration.CONTINUE

    if limit:
        find.foreach_match(cards, size, visit)

    table = Table(title=f"{variant.rules.name} matches", box=box.SIMPLE_HEAVY)
    table.add_column("Cards", justify="left")
    table.add_column("Indices", justify="left")
    for match in shown:
        table.add_row(format_cards(match.cards), " ".join(str(c.index) for c in match.cards))
    console.print(table)

    card_indices = [c.index for c in cards]
    if size == find.TRIPLE_SIZE:
        total = completion.count_triples_indexed(card_indices)
    else:
        total = completion.count_quads_indexed(card_indices)
    console.print(f"[cyan]{total:_} match(es) among {len(cards)} card(s).[/cyan]")


@app.command()
def deal(
    variant: Variant = typer.Option(Variant.SET, help="Variant to deal for."),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    simplified: bool = typer.Option(False, "--simplified", help="Use the 27-card solid-only deck."),
) -> None:
    """Deal an opening table and report its matches."""

    config = GameConfig(
        variant=variant,
        deck=DeckKind.SIMPLIFIED if simplified else DeckKind.FULL,
        seed=seed,
    )
    rules = config.rules()
    rng = config.make_rng()
    deck = config.new_deck(rng)
    table_cards = deck.draw(rules.initial_deal_size)

    order = list(rules.deal_order)
    cells: dict[int, card.Card] = {}
    for dealt in table_cards:
        cells[order.pop()] = dealt

    console.print(card_table([cells[cell] for cell in sorted(cells)], title=f"{rules.name} table"))
    console.print(f"[cyan]Stock[/cyan]: {deck.remainder()} card(s)")
    console.print(f"[cyan]Matches[/cyan]: {rules.count_matches(table_cards)}")
    hint = rules.hint(table_cards, rng)
    if hint is None:
        console.print("[yellow]No match on the table.[/yellow]")
    else:
        console.print(f"[cyan]Hint[/cyan]: {format_cards(hint)} (#{hint[0].index}, #{hint[1].index})")


def main() -> None:
    """Entry-point for ``python -m setcore.cli``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
