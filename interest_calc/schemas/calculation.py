"""Data contracts for the calculation endpoints."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from interest_calc.models import ScenarioParams, TaxSegment


class ScenarioRequest(BaseModel):
    """Lump-sum scenario inputs."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Starting capital.")
    annual_rate: float = Field(
        ...,
        description="Nominal annual rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    compounds_per_year: int = Field(
        ...,
        ge=1,
        description="Compounding periods per year (1=annually, 12=monthly, 365=daily).",
    )
    years: float = Field(..., ge=0, description="Horizon in years.")

    def to_params(self) -> ScenarioParams:
        return ScenarioParams(
            principal=self.principal,
            annual_rate=self.annual_rate,
            compounds_per_year=self.compounds_per_year,
            years=self.years,
        )


class ContributionRequest(ScenarioRequest):
    monthly_contribution: float = Field(..., ge=0, description="Amount added at the end of each month.")


class TimeToTargetRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float
    target_amount: float
    annual_rate: float
    compounds_per_year: int = Field(..., ge=1)


class PrincipalForTargetRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target_amount: float = Field(..., ge=0)
    annual_rate: float
    compounds_per_year: int = Field(..., ge=1)
    years: float


class WeeklyTaxRequest(BaseModel):
    """Inputs for weekly compounding with a yearly capital gains tax."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0, description="Initial or carried-forward principal.")
    weekly_rate: float = Field(..., description="Weekly rate of return as a decimal (e.g. 0.02 for 2%).")
    weeks: int = Field(..., ge=0, description="Number of weeks to extrapolate.")
    weekly_contribution: float = Field(0.0, ge=0)
    capital_gains_tax: float = Field(
        ...,
        ge=0,
        le=1,
        description="Tax rate on positive yearly profit (e.g. 0.37 for 37%).",
    )


class FrequencyComparisonRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    principal: float = Field(..., ge=0)
    annual_rate: float
    years: float = Field(..., ge=0)
    frequencies: Optional[Dict[str, PositiveInt]] = Field(
        default=None,
        description="Label -> compounds per year; defaults to annual through daily.",
    )


class ProjectionResponse(BaseModel):
    final_amount: float
    total_interest: float
    principal: float
    effective_annual_rate: float
    growth_factor: float
    display: Dict[str, str]


class ContributionResponse(ProjectionResponse):
    monthly_contribution: float
    total_contributions: float
    without_contributions: ProjectionResponse
    difference: float


class TimeToTargetResponse(BaseModel):
    reachable: bool
    years: Optional[float]
    months: Optional[float]


class PrincipalForTargetResponse(BaseModel):
    feasible: bool
    principal: Optional[float]
    display: Optional[str]


class BreakdownRow(ProjectionResponse):
    year: int = Field(..., ge=1)


class BreakdownResponse(BaseModel):
    rows: List[BreakdownRow]


class WeeklyTaxResponse(BaseModel):
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
    years: float
    segments: List[TaxSegment]
    display: Dict[str, str]


class FrequencyRow(ProjectionResponse):
    label: str
    compounds_per_year: int


class FrequencyComparisonResponse(BaseModel):
    rows: List[FrequencyRow]
