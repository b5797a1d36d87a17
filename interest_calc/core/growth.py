"""Closed-form compound growth, contribution annuities and year-by-year breakdowns."""

from __future__ import annotations

from typing import Dict, List, Optional

from interest_calc.core.numeric import safe_pow
from interest_calc.models import (
    Breakdown,
    ContributionComparison,
    FrequencyResult,
    ProjectionResult,
    ScenarioParams,
)

MONTHS_PER_YEAR = 12

COMPOUNDING_FREQUENCIES: Dict[str, int] = {
    "Annually": 1,
    "Semi-annually": 2,
    "Quarterly": 4,
    "Monthly": 12,
    "Daily": 365,
}


def effective_annual_rate(annual_rate: float, compounds_per_year: int) -> float:
    """Single-compounding equivalent of a nominal rate: (1 + r/n)^n - 1."""
    compounds = float(compounds_per_year)
    return safe_pow(1.0 + annual_rate / compounds, compounds) - 1.0


def growth_amount(principal: float, annual_rate: float, compounds_per_year: int, years: float) -> float:
    """A = P(1 + r/n)^(nt)."""
    compounds = float(compounds_per_year)
    return principal * safe_pow(1.0 + annual_rate / compounds, compounds * years)


def annuity_future_value(contribution: float, periodic_rate: float, periods: float) -> float:
    """
    Future value of `periods` equal contributions made at the end of each period.

    A non-positive rate degenerates to the plain sum so no division is attempted.
    """
    if periodic_rate > 0:
        return contribution * (safe_pow(1.0 + periodic_rate, periods) - 1.0) / periodic_rate
    return contribution * periods


def calculate_compound_interest(params: ScenarioParams) -> ProjectionResult:
    """
    Grow a lump sum:

      A   = P(1 + r/n)^(nt)
      EAR = (1 + r/n)^n - 1
    """
    final_amount = growth_amount(
        params.principal, params.annual_rate, params.compounds_per_year, params.years
    )
    return ProjectionResult(
        final_amount=final_amount,
        total_interest=final_amount - params.principal,
        principal=params.principal,
        effective_annual_rate=effective_annual_rate(params.annual_rate, params.compounds_per_year),
    )


def calculate_compound_interest_with_contributions(
    params: ScenarioParams,
    monthly_contribution: float,
) -> ProjectionResult:
    """
    Lump-sum growth plus a stream of monthly contributions.

    Contributions always compound monthly (rate r/12 over 12t months), whatever
    compounds_per_year says for the principal.
    """
    monthly_rate = params.annual_rate / MONTHS_PER_YEAR
    total_months = params.years * MONTHS_PER_YEAR

    principal_future_value = growth_amount(
        params.principal, params.annual_rate, params.compounds_per_year, params.years
    )
    contribution_future_value = annuity_future_value(monthly_contribution, monthly_rate, total_months)

    final_amount = principal_future_value + contribution_future_value
    return ProjectionResult(
        final_amount=final_amount,
        total_interest=final_amount - params.principal - monthly_contribution * total_months,
        principal=params.principal,
        effective_annual_rate=effective_annual_rate(params.annual_rate, params.compounds_per_year),
    )


def generate_breakdown(params: ScenarioParams) -> Breakdown:
    """One entry per whole year 1..floor(years); a fractional tail is not represented."""
    breakdown: Breakdown = {}
    for year in range(1, int(params.years) + 1):
        year_params = params.model_copy(update={"years": float(year)})
        breakdown[year] = calculate_compound_interest(year_params)
    return breakdown


def growth_factor(final_amount: float, base: float) -> float:
    """final / base, or 0.0 when there is no positive base to compare against."""
    if base <= 0:
        return 0.0
    return final_amount / base


def compare_contributions(params: ScenarioParams, monthly_contribution: float) -> ContributionComparison:
    with_contributions = calculate_compound_interest_with_contributions(params, monthly_contribution)
    without_contributions = calculate_compound_interest(params)
    return ContributionComparison(
        with_contributions=with_contributions,
        without_contributions=without_contributions,
        monthly_contribution=monthly_contribution,
        total_contributions=monthly_contribution * params.years * MONTHS_PER_YEAR,
        difference=with_contributions.final_amount - without_contributions.final_amount,
    )


def compare_frequencies(
    principal: float,
    annual_rate: float,
    years: float,
    frequencies: Optional[Dict[str, int]] = None,
) -> List[FrequencyResult]:
    rows: List[FrequencyResult] = []
    for label, compounds in (frequencies or COMPOUNDING_FREQUENCIES).items():
        params = ScenarioParams(
            principal=principal,
            annual_rate=annual_rate,
            compounds_per_year=compounds,
            years=years,
        )
        rows.append(
            FrequencyResult(
                label=label,
                compounds_per_year=compounds,
                result=calculate_compound_interest(params),
            )
        )
    return rows


__all__ = [
    "COMPOUNDING_FREQUENCIES",
    "MONTHS_PER_YEAR",
    "annuity_future_value",
    "calculate_compound_interest",
    "calculate_compound_interest_with_contributions",
    "compare_contributions",
    "compare_frequencies",
    "effective_annual_rate",
    "generate_breakdown",
    "growth_amount",
    "growth_factor",
]
