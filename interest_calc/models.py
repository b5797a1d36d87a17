from __future__ import annotations

from typing import Dict, NamedTuple

from pydantic import BaseModel, ConfigDict


class ScenarioParams(BaseModel):
    """Inputs shared by the growth, contribution and breakdown calculations.

    compounds_per_year must be >= 1; the engine does not check it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float
    annual_rate: float
    compounds_per_year: int
    years: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_amount: float
    total_interest: float
    principal: float
    effective_annual_rate: float


Breakdown = Dict[int, ProjectionResult]


class WeeklyTaxResult(NamedTuple):
    final_after_tax: float
    profit_before_tax: float
    total_tax_paid: float


class TaxSegment(BaseModel):
    """One yearly (or trailing partial) block walked by the tax-drag accumulator."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    index: int
    periods: int
    starting_balance: float
    contributions: float
    gross_end: float
    profit: float
    tax: float
    ending_balance: float


class ContributionComparison(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    with_contributions: ProjectionResult
    without_contributions: ProjectionResult
    monthly_contribution: float
    total_contributions: float
    difference: float


class FrequencyResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    compounds_per_year: int
    result: ProjectionResult


class WeeklyTaxSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_after_tax: float
    profit_before_tax: float
    total_tax_paid: float
    total_contributions: float
    total_invested: float
    final_before_tax: float
    net_profit_after_tax: float
    growth_factor_after_tax: float
    effective_annual_return_after_tax: float
    final_without_tax: float
    tax_impact: float
    tax_impact_share: float
