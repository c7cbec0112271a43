"""Closed-form goal planning helpers."""

from __future__ import annotations

from investcalc.core.numeric import float_div, float_pow

# 4% rule: annual withdrawal as a share of the retirement principal
WITHDRAWAL_RATE = 0.04


class GoalPlanningError(ValueError):
    pass


def retirement_target(
    desired_annual_income: float,
    retirement_years: float,
    inflation_rate_percent: float,
) -> float:
    """Principal needed to fund ``desired_annual_income`` (today's money) after
    ``retirement_years`` of inflation, under the 4% withdrawal rule."""
    inflation_multiplier = float_pow(1 + inflation_rate_percent / 100, retirement_years)
    return desired_annual_income * inflation_multiplier / WITHDRAWAL_RATE


def required_monthly_contribution(
    goal_amount: float,
    current_savings: float,
    years: int,
    annual_return_percent: float,
) -> float:
    """
    Level monthly deposit that, together with ``current_savings`` growing at
    the same return, reaches ``goal_amount`` after ``years``.

    Returns 0.0 when current savings alone get there. With a zero return the
    remaining amount is simply spread over the months. Extreme rates give
    inf or nan rather than raising.
    """
    monthly_return = annual_return_percent / 100 / 12
    total_months = years * 12

    growth = float_pow(1 + monthly_return, total_months)
    remaining = goal_amount - current_savings * growth
    if remaining <= 0:
        return 0.0

    if total_months <= 0:
        raise GoalPlanningError(
            f"goal is {remaining} short with no months left to contribute (years={years})"
        )

    # a return too small to move the balance rounds growth to exactly 1.0
    if monthly_return == 0 or growth == 1:
        return remaining / total_months

    return float_div(remaining, (growth - 1) / monthly_return)


__all__ = [
    "WITHDRAWAL_RATE",
    "GoalPlanningError",
    "retirement_target",
    "required_monthly_contribution",
]
