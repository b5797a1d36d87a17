"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from interest_calc.core.formatting import format_currency, format_multiple, format_percentage
from interest_calc.core.growth import (
    MONTHS_PER_YEAR,
    compare_contributions,
    compare_frequencies,
    calculate_compound_interest,
    generate_breakdown,
    growth_factor,
)
from interest_calc.core.solvers import solve_principal_for_target, solve_time_to_target
from interest_calc.core.tax_drag import WEEKS_PER_YEAR, summarize_weekly_tax, tax_drag_schedule
from interest_calc.models import ProjectionResult
from interest_calc.schemas.calculation import (
    BreakdownResponse,
    BreakdownRow,
    ContributionRequest,
    ContributionResponse,
    FrequencyComparisonRequest,
    FrequencyComparisonResponse,
    FrequencyRow,
    PrincipalForTargetRequest,
    PrincipalForTargetResponse,
    ProjectionResponse,
    ScenarioRequest,
    TimeToTargetRequest,
    TimeToTargetResponse,
    WeeklyTaxRequest,
    WeeklyTaxResponse,
)
from interest_calc.utils.logging import get_logger

api_bp = Blueprint("api", __name__)
logger = get_logger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _projection_fields(result: ProjectionResult, base: float) -> Dict[str, Any]:
    factor = growth_factor(result.final_amount, base)
    return {
        **result.model_dump(),
        "growth_factor": factor,
        "display": {
            "final_amount": format_currency(result.final_amount),
            "total_interest": format_currency(result.total_interest),
            "principal": format_currency(result.principal),
            "effective_annual_rate": format_percentage(result.effective_annual_rate),
            "growth_factor": format_multiple(factor),
        },
    }


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.post("/calc/growth")
def growth() -> Any:
    payload = ScenarioRequest.model_validate(_payload())
    result = calculate_compound_interest(payload.to_params())
    logger.info(
        "growth: P=%s r=%s n=%s t=%s -> %.2f",
        payload.principal,
        payload.annual_rate,
        payload.compounds_per_year,
        payload.years,
        result.final_amount,
    )
    response = ProjectionResponse.model_validate(_projection_fields(result, result.principal))
    return jsonify(response.model_dump())


@api_bp.post("/calc/growth-with-contributions")
def growth_with_contributions() -> Any:
    payload = ContributionRequest.model_validate(_payload())
    comparison = compare_contributions(payload.to_params(), payload.monthly_contribution)
    logger.info(
        "growth with contributions: C=%s -> %.2f (difference %.2f)",
        payload.monthly_contribution,
        comparison.with_contributions.final_amount,
        comparison.difference,
    )
    invested = payload.principal + comparison.total_contributions
    response = ContributionResponse.model_validate(
        {
            **_projection_fields(comparison.with_contributions, invested),
            "monthly_contribution": comparison.monthly_contribution,
            "total_contributions": comparison.total_contributions,
            "without_contributions": _projection_fields(
                comparison.without_contributions, payload.principal
            ),
            "difference": comparison.difference,
        }
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/time-to-target")
def time_to_target() -> Any:
    payload = TimeToTargetRequest.model_validate(_payload())
    years = solve_time_to_target(
        payload.principal,
        payload.target_amount,
        payload.annual_rate,
        payload.compounds_per_year,
    )
    if years is None:
        logger.info(
            "time to target: unreachable for P=%s T=%s r=%s",
            payload.principal,
            payload.target_amount,
            payload.annual_rate,
        )
        response = TimeToTargetResponse(reachable=False, years=None, months=None)
    else:
        response = TimeToTargetResponse(reachable=True, years=years, months=years * MONTHS_PER_YEAR)
    return jsonify(response.model_dump())


@api_bp.post("/calc/principal-for-target")
def principal_for_target() -> Any:
    payload = PrincipalForTargetRequest.model_validate(_payload())
    principal = solve_principal_for_target(
        payload.target_amount,
        payload.annual_rate,
        payload.compounds_per_year,
        payload.years,
    )
    if principal is None:
        logger.info("principal for target: infeasible for r=%s t=%s", payload.annual_rate, payload.years)
        response = PrincipalForTargetResponse(feasible=False, principal=None, display=None)
    else:
        response = PrincipalForTargetResponse(
            feasible=True, principal=principal, display=format_currency(principal)
        )
    return jsonify(response.model_dump())


@api_bp.post("/calc/breakdown")
def breakdown() -> Any:
    payload = ScenarioRequest.model_validate(_payload())
    table = generate_breakdown(payload.to_params())
    rows = [
        BreakdownRow.model_validate({"year": year, **_projection_fields(table[year], payload.principal)})
        for year in sorted(table)
    ]
    logger.info("breakdown: %d year(s)", len(rows))
    return jsonify(BreakdownResponse(rows=rows).model_dump())


@api_bp.post("/calc/weekly-tax")
def weekly_tax() -> Any:
    payload = WeeklyTaxRequest.model_validate(_payload())
    args = (
        payload.principal,
        payload.weekly_rate,
        payload.weeks,
        payload.weekly_contribution,
        payload.capital_gains_tax,
    )
    summary = summarize_weekly_tax(*args)
    segments = tax_drag_schedule(*args)
    logger.info(
        "weekly tax: %d weeks over %d segment(s), tax paid %.2f",
        payload.weeks,
        len(segments),
        summary.total_tax_paid,
    )
    response = WeeklyTaxResponse.model_validate(
        {
            **summary.model_dump(),
            "years": payload.weeks / WEEKS_PER_YEAR,
            "segments": segments,
            "display": {
                "final_after_tax": format_currency(summary.final_after_tax),
                "final_before_tax": format_currency(summary.final_before_tax),
                "profit_before_tax": format_currency(summary.profit_before_tax),
                "total_tax_paid": format_currency(summary.total_tax_paid),
                "net_profit_after_tax": format_currency(summary.net_profit_after_tax),
                "weekly_rate": format_percentage(payload.weekly_rate),
                "capital_gains_tax": format_percentage(payload.capital_gains_tax),
                "growth_factor_after_tax": format_multiple(summary.growth_factor_after_tax),
                "effective_annual_return_after_tax": format_percentage(
                    summary.effective_annual_return_after_tax
                ),
                "tax_impact": format_currency(summary.tax_impact),
            },
        }
    )
    return jsonify(response.model_dump())


@api_bp.post("/calc/frequencies")
def frequencies() -> Any:
    payload = FrequencyComparisonRequest.model_validate(_payload())
    rows = [
        FrequencyRow.model_validate(
            {
                "label": row.label,
                "compounds_per_year": row.compounds_per_year,
                **_projection_fields(row.result, payload.principal),
            }
        )
        for row in compare_frequencies(
            payload.principal, payload.annual_rate, payload.years, payload.frequencies
        )
    ]
    return jsonify(FrequencyComparisonResponse(rows=rows).model_dump())
