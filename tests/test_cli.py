from __future__ import annotations

from typer.testing import CliRunner

from setcore.card import complete_pair, encode
from setcore.cli.main import app

runner = CliRunner()


def test_show_lists_card_features() -> None:
    result = runner.invoke(app, ["show", "0", "80"])

    assert result.exit_code == 0
    assert "oval" in result.output
    assert "diamond" in result.output
    assert "outlined" in result.output


def test_show_rejects_out_of_range_index() -> None:
    result = runner.invoke(app, ["show", "81"])

    assert result.exit_code != 0


def test_check_accepts_a_set() -> None:
    result = runner.invoke(app, ["check", "21", "41", "58"])

    assert result.exit_code == 0
    assert "is a set" in result.output


def test_check_rejects_a_non_set() -> None:
    result = runner.invoke(app, ["check", "0", "1", "3"])

    assert result.exit_code == 1
    assert "is not a set" in result.output


def test_check_reports_superset_witness() -> None:
    a, b, c = encode(0), encode(1), encode(3)
    d = complete_pair(complete_pair(a, b), c)
    args = [str(x.index) for x in (a, b, c, d)]

    result = runner.invoke(app, ["check", *args])

    assert result.exit_code == 0
    assert "is a superset" in result.output


def test_check_rejects_wrong_group_sizes() -> None:
    assert runner.invoke(app, ["check", "0", "1"]).exit_code == 2
    assert runner.invoke(app, ["check", "0", "0", "1"]).exit_code == 2


def test_find_counts_matches_among_cards() -> None:
    result = runner.invoke(app, ["find", "11", "19", "31", "34", "64", "72", "21", "41", "58"])

    assert result.exit_code == 0
    assert "1 match(es) among 9 card(s)" in result.output


def test_find_defaults_to_full_deck() -> None:
    result = runner.invoke(app, ["find", "--limit", "3"])

    assert result.exit_code == 0
    assert "1_080 match(es) among 81 card(s)" in result.output


def test_deal_reports_table_for_each_variant() -> None:
    for variant, title in (("set", "Set table"), ("superset", "SuperSet table")):
        result = runner.invoke(app, ["deal", "--variant", variant, "--seed", "7"])

        assert result.exit_code == 0
        assert title in result.output
        assert "Stock" in result.output


def test_deal_simplified_deck() -> None:
    result = runner.invoke(app, ["deal", "--seed", "1", "--simplified"])

    assert result.exit_code == 0
    assert "Stock: 15 card(s)" in result.output
