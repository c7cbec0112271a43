"""Named market scenarios and side-by-side projection comparison."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from investcalc.core.projection import project
from investcalc.schemas.investment import InvestmentParameters, ProjectionResult


class MarketScenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    returnRate: float  # annual %, fed into annualReturnPercent
    volatility: float  # informational only, the engine is deterministic
    color: str


class ScenarioComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    inputs: InvestmentParameters
    result: ProjectionResult


class UnknownScenarioError(KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown market scenario: {self.name!r}"


MARKET_SCENARIOS: Tuple[MarketScenario, ...] = (
    MarketScenario(
        name="Conservative",
        description="Low-risk investments (bonds, CDs)",
        returnRate=4,
        volatility=5,
        color="#10b981",
    ),
    MarketScenario(
        name="Moderate",
        description="Balanced portfolio (60/40 stocks/bonds)",
        returnRate=7,
        volatility=10,
        color="#3b82f6",
    ),
    MarketScenario(
        name="Aggressive",
        description="High-growth stocks and equity funds",
        returnRate=10,
        volatility=15,
        color="#f59e0b",
    ),
    MarketScenario(
        name="Historical S&P 500",
        description="Based on long-term S&P 500 performance",
        returnRate=10.5,
        volatility=20,
        color="#8b5cf6",
    ),
)

# scenarios shown side by side before the user picks any
DEFAULT_COMPARISON: Tuple[str, ...] = ("Conservative", "Moderate", "Aggressive")


def get_scenario(name: str) -> MarketScenario:
    for scenario in MARKET_SCENARIOS:
        if scenario.name == name:
            return scenario
    raise UnknownScenarioError(name)


def apply_scenario(base: InvestmentParameters, scenario: MarketScenario) -> InvestmentParameters:
    """Copy of ``base`` with the scenario's return rate swapped in."""
    return base.model_copy(update={"annualReturnPercent": scenario.returnRate})


def compare_scenarios(
    base: InvestmentParameters,
    names: Optional[Iterable[str]] = None,
) -> List[ScenarioComparison]:
    """
    Project ``base`` once per requested scenario, in request order.

    A name given twice is only projected once. No names means
    DEFAULT_COMPARISON (the catalog minus the historical index). Unknown
    names raise UnknownScenarioError before any work is done.
    """
    selected: List[MarketScenario] = []
    seen = set()
    for name in names or DEFAULT_COMPARISON:
        if name in seen:
            continue
        seen.add(name)
        selected.append(get_scenario(name))

    comparisons: List[ScenarioComparison] = []
    for scenario in selected:
        inputs = apply_scenario(base, scenario)
        comparisons.append(
            ScenarioComparison(
                name=scenario.name,
                color=scenario.color,
                inputs=inputs,
                result=project(inputs),
            )
        )
    return comparisons


def comparison_chart_rows(
    comparisons: Iterable[ScenarioComparison],
) -> List[Dict[str, Union[int, float]]]:
    """
    Merge yearly totals into one row per year:
    ``{"year": 1, "Conservative": 16240.5, "Moderate": ...}``.
    Scenarios without data for a year are left out of that row.
    """
    comparisons = list(comparisons)
    if not comparisons:
        return []

    by_year: List[Dict[int, float]] = [
        {snap.year: snap.totalValue for snap in c.result.yearlySeries} for c in comparisons
    ]
    max_years = max(c.inputs.years for c in comparisons)

    rows: List[Dict[str, Union[int, float]]] = []
    for year in range(1, max_years + 1):
        row: Dict[str, Union[int, float]] = {"year": year}
        for comparison, totals in zip(comparisons, by_year):
            if year in totals:
                row[comparison.name] = totals[year]
        rows.append(row)
    return rows


__all__ = [
    "MarketScenario",
    "ScenarioComparison",
    "UnknownScenarioError",
    "MARKET_SCENARIOS",
    "DEFAULT_COMPARISON",
    "get_scenario",
    "apply_scenario",
    "compare_scenarios",
    "comparison_chart_rows",
]
