"""Data contracts for investment projections."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, computed_field


class InvestmentParameters(BaseModel):
    """Inputs for a single projection.

    Percentages are whole numbers (7 means 7%). No range checks happen here:
    negative amounts and rates are valid arithmetic input. ``years`` must be a
    whole number; a fractional value fails model construction.
    ``compoundingFrequency`` is carried for callers but the engine always
    compounds monthly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    initialAmount: float
    monthlyContribution: float
    annualReturnPercent: float
    years: int
    inflationRatePercent: float = 0.0
    taxRatePercent: float = 0.0
    compoundingFrequency: int = 12


class MonthSnapshot(BaseModel):
    """Portfolio state at the end of one elapsed month (1-indexed)."""

    model_config = ConfigDict(frozen=True)

    month: int
    totalValue: float
    contributions: float
    # cumulative nominal gain; negative when the portfolio lost money
    interest: float
    realValue: float


class YearSnapshot(MonthSnapshot):
    # inherits the fields of the year's final month
    year: int
    afterTaxValue: float


class ProjectionResult(BaseModel):
    """
    Full projection output.

    The ``final*`` summary fields are ``None`` when no month was simulated
    (zero or negative horizon). Check ``hasData`` before reading them.
    """

    model_config = ConfigDict(frozen=True)

    monthlySeries: List[MonthSnapshot]
    yearlySeries: List[YearSnapshot]

    finalTotalValue: Optional[float] = None
    finalContributions: Optional[float] = None
    finalInterest: Optional[float] = None
    finalRealValue: Optional[float] = None
    finalAfterTaxValue: Optional[float] = None

    @computed_field  # type: ignore[misc]
    @property
    def hasData(self) -> bool:
        return bool(self.monthlySeries)

    @computed_field  # type: ignore[misc]
    @property
    def totalReturnPercent(self) -> Optional[float]:
        """Final gain as a percentage of everything contributed."""
        if not self.hasData or not self.finalContributions:
            return None
        return self.finalInterest / self.finalContributions * 100


__all__ = [
    "InvestmentParameters",
    "MonthSnapshot",
    "YearSnapshot",
    "ProjectionResult",
]
