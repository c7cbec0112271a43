"""Monthly compound-growth projection engine."""

from __future__ import annotations

from typing import List

from investcalc.core.logging import get_logger
from investcalc.core.numeric import float_div, float_pow
from investcalc.schemas.investment import (
    InvestmentParameters,
    MonthSnapshot,
    ProjectionResult,
    YearSnapshot,
)

logger = get_logger(__name__)

MONTHS_PER_YEAR = 12


def after_tax_value(contributions: float, interest: float, tax_rate_percent: float) -> float:
    """Principal is never taxed, only the gain portion."""
    return contributions + interest * (1 - tax_rate_percent / 100)


def project(params: InvestmentParameters) -> ProjectionResult:
    """
    Step a portfolio forward one month at a time.

    Order of operations (per month m):
      1) From month 2 on, add the monthly contribution (month 1 only holds
         the initial amount).
      2) Apply one month of growth, so the fresh contribution grows too.
      3) Discount by cumulative inflation over all m elapsed months.
      4) Record the month; every 12th month also record the year with its
         after-tax value.

    Compounding is always monthly; ``params.compoundingFrequency`` is not
    consulted. A zero or negative horizon yields empty series and ``None``
    summary fields. Nothing is rounded.
    """
    monthly_return = params.annualReturnPercent / 100 / 12
    monthly_inflation = params.inflationRatePercent / 100 / 12
    total_months = max(params.years, 0) * MONTHS_PER_YEAR

    value = params.initialAmount
    contributions = params.initialAmount

    monthly: List[MonthSnapshot] = []
    yearly: List[YearSnapshot] = []

    for month in range(1, total_months + 1):
        if month > 1:
            value += params.monthlyContribution
            contributions += params.monthlyContribution

        value *= 1 + monthly_return

        real_value = float_div(value, float_pow(1 + monthly_inflation, month))
        interest = value - contributions

        monthly.append(
            MonthSnapshot(
                month=month,
                totalValue=value,
                contributions=contributions,
                interest=interest,
                realValue=real_value,
            )
        )

        if month % MONTHS_PER_YEAR == 0:
            yearly.append(
                YearSnapshot(
                    month=month,
                    year=month // MONTHS_PER_YEAR,
                    totalValue=value,
                    contributions=contributions,
                    interest=interest,
                    realValue=real_value,
                    afterTaxValue=after_tax_value(contributions, interest, params.taxRatePercent),
                )
            )

    logger.debug(
        "projection computed months=%d years=%d annual_return=%s",
        len(monthly),
        len(yearly),
        params.annualReturnPercent,
    )

    if not monthly:
        return ProjectionResult(monthlySeries=monthly, yearlySeries=yearly)

    last_month = monthly[-1]
    last_year = yearly[-1]
    return ProjectionResult(
        monthlySeries=monthly,
        yearlySeries=yearly,
        finalTotalValue=last_month.totalValue,
        finalContributions=last_month.contributions,
        finalInterest=last_month.interest,
        finalRealValue=last_month.realValue,
        finalAfterTaxValue=last_year.afterTaxValue,
    )


__all__ = ["MONTHS_PER_YEAR", "after_tax_value", "project"]
