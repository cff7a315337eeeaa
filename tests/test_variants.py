from __future__ import annotations

import random

import pytest

from setcore import card
from setcore.card import complete_pair, encode
from setcore.pairs import iter_pairs
from setcore.variants import SET_RULES, SUPERSET_RULES, Rules, Variant

SET_FREE_20 = [0, 1, 3, 4, 9, 13, 14, 15, 19, 34, 38, 39, 40, 44, 49, 50, 52, 53, 60, 74]


def _cards(indices: list[int]) -> list[card.Card]:
    return [encode(index) for index in indices]


@pytest.mark.parametrize(
    ("rules", "name", "match_size", "deal_size"),
    [
        (SET_RULES, "Set", 3, 12),
        (SUPERSET_RULES, "SuperSet", 4, 10),
    ],
)
def test_rule_parameters(rules: Rules, name: str, match_size: int, deal_size: int) -> None:
    assert rules.name == name
    assert rules.match_size == match_size
    assert rules.initial_deal_size == deal_size
    assert len(set(rules.deal_order)) == len(rules.deal_order)
    assert len(rules.deal_order) >= deal_size


def test_deal_orders_fill_from_the_end() -> None:
    assert SET_RULES.deal_order == (19, 14, 9, 15, 10, 5, 18, 17, 16, 13, 12, 11, 8, 7, 6, 3, 2, 1)
    assert SUPERSET_RULES.deal_order == (18, 17, 16, 13, 11, 8, 6, 3, 2, 1)
    assert SET_RULES.deal_order[-1] == 1


def test_variant_enum_maps_to_rules() -> None:
    assert Variant.SET.rules is SET_RULES
    assert Variant("superset").rules is SUPERSET_RULES


def test_is_valid_checks_selection_size() -> None:
    assert SET_RULES.is_valid(_cards([21, 41, 58]))
    assert not SET_RULES.is_valid(_cards([0, 1, 3]))
    with pytest.raises(ValueError):
        SET_RULES.is_valid(_cards([21, 41]))
    with pytest.raises(ValueError):
        SUPERSET_RULES.is_valid(_cards([21, 41, 58]))


def test_superset_validation() -> None:
    a, b, c = encode(0), encode(1), encode(3)
    d = complete_pair(complete_pair(a, b), c)

    assert SUPERSET_RULES.is_valid([a, b, c, d])
    assert not SUPERSET_RULES.is_valid(_cards([0, 1, 2, 4]))


def test_set_hint_returns_two_cards_of_a_set() -> None:
    table = _cards([11, 19, 31, 34, 64, 72, 21, 41, 58])

    hint = SET_RULES.hint(table, random.Random(8))

    assert hint is not None
    assert len(hint) == 2
    assert {c.index for c in hint} < {21, 41, 58}


def test_superset_hint_pair_shares_a_completion() -> None:
    rng = random.Random(12)
    table = card.full_deck()[:10]

    hint = SUPERSET_RULES.hint(table, rng)

    assert hint is not None
    target = complete_pair(*hint)
    others = [c for c in table if c not in hint]
    assert any(complete_pair(x, y) == target for x, y in iter_pairs(others))


def test_stuck_tables_have_no_hint() -> None:
    table = _cards(SET_FREE_20)

    assert SET_RULES.is_stuck(table)
    assert SET_RULES.hint(table) is None
    assert SET_RULES.count_matches(table) == 0
    assert not SET_RULES.is_stuck(_cards([21, 41, 58]))


def test_count_matches_uses_variant_size() -> None:
    table = _cards([11, 19, 31, 34, 64, 72, 21, 41, 58])

    assert SET_RULES.count_matches(table) == 1
    assert SUPERSET_RULES.count_matches(card.full_deck()[:9]) > 0
