"""HTTP routes for the Flask API."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest

from investcalc.core.config import Settings
from investcalc.core.goals import (
    GoalPlanningError,
    required_monthly_contribution,
    retirement_target,
)
from investcalc.core.logging import get_logger
from investcalc.core.projection import project
from investcalc.core.scenarios import (
    MARKET_SCENARIOS,
    UnknownScenarioError,
    compare_scenarios,
    comparison_chart_rows,
)
from investcalc.schemas.requests import (
    ComparisonRequest,
    HealthResponse,
    ProjectionRequest,
    RequiredContributionRequest,
    RequiredContributionResponse,
    RetirementTargetRequest,
    RetirementTargetResponse,
)

logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> Settings:
    return current_app.config["SETTINGS"]


def _validation_context() -> Dict[str, Any]:
    return {"max_years": _settings().max_years}


def _json_body() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=False)
    if not isinstance(raw_payload, dict):
        raise BadRequest("request body must be a JSON object")
    return raw_payload


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected payload errors=%d", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(UnknownScenarioError)
def _handle_unknown_scenario(exc: UnknownScenarioError):
    return jsonify({"detail": str(exc)}), HTTPStatus.NOT_FOUND


@api_bp.errorhandler(GoalPlanningError)
def _handle_goal_error(exc: GoalPlanningError):
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(BadRequest)
def _handle_bad_request(exc: BadRequest):
    return jsonify({"detail": exc.description}), HTTPStatus.BAD_REQUEST


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(env=_settings().env)
    return jsonify(response.model_dump())


@api_bp.get("/scenarios")
def scenarios() -> Any:
    return jsonify([scenario.model_dump() for scenario in MARKET_SCENARIOS])


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Month-by-month and year-by-year projection for one parameter set."""
    payload = ProjectionRequest.model_validate(_json_body(), context=_validation_context())
    result = project(payload.to_parameters())

    exclude = set()
    if request.args.get("monthly", "true").lower() in ("0", "false", "no"):
        exclude.add("monthlySeries")
    return jsonify(result.model_dump(exclude=exclude))


@api_bp.post("/calc/compare")
def compare() -> Any:
    """Same inputs projected under several market scenarios."""
    payload = ComparisonRequest.model_validate(_json_body(), context=_validation_context())
    comparisons = compare_scenarios(payload.base.to_parameters(), payload.scenarios)
    logger.info("compared scenarios=%s", ",".join(c.name for c in comparisons))

    return jsonify(
        {
            "comparisons": [
                c.model_dump(exclude={"result": {"monthlySeries"}}) for c in comparisons
            ],
            "chart": comparison_chart_rows(comparisons),
        }
    )


@api_bp.post("/goals/retirement-target")
def goal_retirement_target() -> Any:
    payload = RetirementTargetRequest.model_validate(_json_body(), context=_validation_context())
    target = retirement_target(
        payload.desiredAnnualIncome,
        payload.retirementYears,
        payload.inflationRatePercent,
    )
    return jsonify(RetirementTargetResponse(target=target).model_dump())


@api_bp.post("/goals/required-contribution")
def goal_required_contribution() -> Any:
    payload = RequiredContributionRequest.model_validate(
        _json_body(), context=_validation_context()
    )
    amount = required_monthly_contribution(
        payload.goalAmount,
        payload.currentSavings,
        payload.years,
        payload.annualReturnPercent,
    )
    return jsonify(RequiredContributionResponse(monthlyContribution=amount).model_dump())
