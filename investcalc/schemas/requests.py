"""HTTP request/response contracts.

These models do the range checking that the projection engine deliberately
skips, so anything reaching the engine through the API is sane.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from investcalc.schemas.investment import InvestmentParameters

COMPOUNDING_FREQUENCIES = (1, 2, 4, 12, 52, 365)
DEFAULT_MAX_YEARS = 100


def _check_max_years(years: int, info: ValidationInfo) -> int:
    max_years = (info.context or {}).get("max_years", DEFAULT_MAX_YEARS)
    if years > max_years:
        raise ValueError(f"years must be at most {max_years}")
    return years


class ProjectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialAmount: float = Field(ge=0)
    monthlyContribution: float = Field(0.0, ge=0)
    annualReturnPercent: float = Field(ge=-100, le=100)
    years: int = Field(ge=1)
    inflationRatePercent: float = Field(0.0, ge=-50, le=100)
    taxRatePercent: float = Field(0.0, ge=0, le=100)
    compoundingFrequency: int = 12

    @field_validator("years")
    @classmethod
    def years_within_limit(cls, value: int, info: ValidationInfo) -> int:
        return _check_max_years(value, info)

    @field_validator("compoundingFrequency")
    @classmethod
    def known_frequency(cls, value: int) -> int:
        if value not in COMPOUNDING_FREQUENCIES:
            raise ValueError(f"compoundingFrequency must be one of {COMPOUNDING_FREQUENCIES}")
        return value

    def to_parameters(self) -> InvestmentParameters:
        return InvestmentParameters(**self.model_dump())


class ComparisonRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base: ProjectionRequest
    # empty => every catalog scenario
    scenarios: List[str] = Field(default_factory=list)


class RetirementTargetRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    desiredAnnualIncome: float = Field(ge=0)
    retirementYears: int = Field(ge=0)
    inflationRatePercent: float = Field(0.0, ge=-50, le=100)

    @field_validator("retirementYears")
    @classmethod
    def years_within_limit(cls, value: int, info: ValidationInfo) -> int:
        return _check_max_years(value, info)


class RequiredContributionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    goalAmount: float = Field(ge=0)
    currentSavings: float = Field(0.0, ge=0)
    years: int = Field(ge=1)
    annualReturnPercent: float = Field(ge=-100, le=100)

    @field_validator("years")
    @classmethod
    def years_within_limit(cls, value: int, info: ValidationInfo) -> int:
        return _check_max_years(value, info)


class RetirementTargetResponse(BaseModel):
    target: float


class RequiredContributionResponse(BaseModel):
    monthlyContribution: float


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    env: str
