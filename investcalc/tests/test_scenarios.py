from __future__ import annotations

import pytest

from investcalc.core.projection import project
from investcalc.core.scenarios import (
    DEFAULT_COMPARISON,
    MARKET_SCENARIOS,
    UnknownScenarioError,
    apply_scenario,
    compare_scenarios,
    comparison_chart_rows,
    get_scenario,
)


def test_catalog_contents():
    names = [s.name for s in MARKET_SCENARIOS]
    assert names == ["Conservative", "Moderate", "Aggressive", "Historical S&P 500"]
    assert get_scenario("Moderate").returnRate == 7
    assert get_scenario("Historical S&P 500").returnRate == 10.5


def test_catalog_is_immutable():
    assert isinstance(MARKET_SCENARIOS, tuple)
    with pytest.raises(Exception):
        MARKET_SCENARIOS[0].returnRate = 99


def test_unknown_scenario():
    with pytest.raises(UnknownScenarioError) as excinfo:
        get_scenario("Moonshot")
    assert "Moonshot" in str(excinfo.value)


def test_apply_scenario_only_changes_return(params):
    applied = apply_scenario(params, get_scenario("Aggressive"))

    assert applied.annualReturnPercent == 10
    assert applied.model_dump(exclude={"annualReturnPercent"}) == params.model_dump(
        exclude={"annualReturnPercent"}
    )
    assert params.annualReturnPercent == 7


def test_compare_defaults_to_first_three_scenarios(params):
    comparisons = compare_scenarios(params)

    assert [c.name for c in comparisons] == ["Conservative", "Moderate", "Aggressive"]
    assert [c.name for c in compare_scenarios(params, [])] == list(DEFAULT_COMPARISON)
    totals = [c.result.finalTotalValue for c in comparisons]
    assert totals == sorted(totals)


def test_compare_keeps_order_and_drops_duplicates(params):
    comparisons = compare_scenarios(params, ["Aggressive", "Conservative", "Aggressive"])

    assert [c.name for c in comparisons] == ["Aggressive", "Conservative"]
    assert comparisons[0].color == "#f59e0b"
    assert comparisons[0].result == project(comparisons[0].inputs)


def test_compare_rejects_unknown_names(params):
    with pytest.raises(UnknownScenarioError):
        compare_scenarios(params, ["Moderate", "Nope"])


def test_chart_rows(params):
    comparisons = compare_scenarios(params, ["Conservative", "Moderate"])
    rows = comparison_chart_rows(comparisons)

    assert len(rows) == params.years
    assert rows[0]["year"] == 1
    assert rows[-1]["Moderate"] == comparisons[1].result.finalTotalValue
    assert rows[-1]["Conservative"] < rows[-1]["Moderate"]


def test_chart_rows_with_mixed_horizons(params):
    short = compare_scenarios(params.model_copy(update={"years": 2}), ["Conservative"])
    long = compare_scenarios(params.model_copy(update={"years": 4}), ["Moderate"])
    rows = comparison_chart_rows(short + long)

    assert [r["year"] for r in rows] == [1, 2, 3, 4]
    assert "Conservative" in rows[1]
    assert "Conservative" not in rows[2]
    assert comparison_chart_rows([]) == []
