from __future__ import annotations

import math
from math import isclose

import pytest

from investcalc.core.goals import (
    GoalPlanningError,
    required_monthly_contribution,
    retirement_target,
)
from investcalc.core.projection import project
from investcalc.schemas.investment import InvestmentParameters


def test_retirement_target_uses_four_percent_rule():
    assert isclose(retirement_target(40000, 0, 3), 1_000_000)


def test_retirement_target_inflates_income():
    expected = 40000 * 1.03**25 / 0.04
    assert isclose(retirement_target(40000, 25, 3), expected)
    assert retirement_target(40000, 25, 3) > retirement_target(40000, 25, 0)


def test_goal_already_met_without_growth():
    assert required_monthly_contribution(100000, 100000, 5, 0) == 0


def test_goal_met_by_growth_of_current_savings():
    assert required_monthly_contribution(100000, 80000, 10, 6) == 0


def test_zero_return_spreads_remaining_evenly():
    assert required_monthly_contribution(12000, 0, 1, 0) == 1000
    assert isclose(required_monthly_contribution(30000, 6000, 2, 0), 1000)


def test_required_contribution_matches_annuity_formula():
    r = 6 / 100 / 12
    n = 20 * 12
    growth = (1 + r) ** n
    expected = (500000 - 25000 * growth) / ((growth - 1) / r)

    assert isclose(required_monthly_contribution(500000, 25000, 20, 6), expected)


def test_required_contribution_reaches_goal_in_projection():
    # the projection adds nothing in month 1, so allow for one payment of slack
    payment = required_monthly_contribution(250000, 10000, 15, 7)
    params = InvestmentParameters(
        initialAmount=10000,
        monthlyContribution=payment,
        annualReturnPercent=7,
        years=15,
    )

    final = project(params).finalTotalValue
    assert 250000 - 2 * payment < final <= 250000


def test_zero_horizon_with_shortfall_raises():
    with pytest.raises(GoalPlanningError):
        required_monthly_contribution(1000, 0, 0, 5)

    # nothing to raise about when the goal is already covered
    assert required_monthly_contribution(1000, 5000, 0, 5) == 0


def test_negligible_return_treated_as_no_growth():
    # the monthly rate is too small to change 1.0, so growth rounds to exactly 1
    assert required_monthly_contribution(12000, 0, 1, 1e-15) == 1000


def test_extreme_rates_do_not_raise():
    assert math.isinf(retirement_target(40000, 200, 100000))
    assert required_monthly_contribution(1000, 10, 100, 100000) == 0
    assert math.isnan(required_monthly_contribution(1000, 0, 100, 100000))
