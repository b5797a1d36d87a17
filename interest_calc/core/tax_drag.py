"""Weekly compounding with weekly contributions and a capital gains tax taken once a year."""

from __future__ import annotations

from typing import Iterator, List

from interest_calc.core.growth import annuity_future_value, growth_factor
from interest_calc.core.numeric import safe_pow
from interest_calc.models import TaxSegment, WeeklyTaxResult, WeeklyTaxSummary
from interest_calc.utils.logging import get_logger

logger = get_logger(__name__)

WEEKS_PER_YEAR = 52


def _walk_segments(
    principal: float,
    weekly_rate: float,
    weeks: int,
    weekly_contribution: float,
    capital_gains_tax: float,
) -> Iterator[TaxSegment]:
    """
    Yield one TaxSegment per tax year, carrying the after-tax balance forward.

    Order of operations (per segment of `periods` weeks, from balance B):
      1) gross = B(1+R)^periods + annuity(contribution, R, periods)
      2) profit = gross - B - contribution * periods
      3) tax = max(0, profit) * tax rate, scaled by periods/52 for the trailing
         partial year only (the profit itself is never pro-rated)
      4) B <- gross - tax
    """
    full_years, remaining_weeks = divmod(weeks, WEEKS_PER_YEAR)
    segment_lengths = [WEEKS_PER_YEAR] * full_years
    if remaining_weeks > 0:
        segment_lengths.append(remaining_weeks)

    balance = principal
    for index, periods in enumerate(segment_lengths):
        contributions = weekly_contribution * periods
        gross_end = balance * safe_pow(1.0 + weekly_rate, periods) + annuity_future_value(
            weekly_contribution, weekly_rate, periods
        )
        profit = gross_end - balance - contributions

        tax = max(0.0, profit) * capital_gains_tax
        if periods < WEEKS_PER_YEAR:
            tax *= periods / WEEKS_PER_YEAR

        ending_balance = gross_end - tax
        logger.debug(
            "segment %d: %d weeks, start=%.2f gross=%.2f profit=%.2f tax=%.2f",
            index,
            periods,
            balance,
            gross_end,
            profit,
            tax,
        )
        yield TaxSegment(
            index=index,
            periods=periods,
            starting_balance=balance,
            contributions=contributions,
            gross_end=gross_end,
            profit=profit,
            tax=tax,
            ending_balance=ending_balance,
        )
        balance = ending_balance


def tax_drag_schedule(
    principal: float,
    weekly_rate: float,
    weeks: int,
    weekly_contribution: float,
    capital_gains_tax: float,
) -> List[TaxSegment]:
    """Per-segment rows; empty when weeks == 0."""
    return list(_walk_segments(principal, weekly_rate, weeks, weekly_contribution, capital_gains_tax))


def calculate_weekly_with_yearly_tax(
    principal: float,
    weekly_rate: float,
    weeks: int,
    weekly_contribution: float,
    capital_gains_tax: float,
) -> WeeklyTaxResult:
    """
    Returns (final_after_tax, profit_before_tax, total_tax_paid).

    Tax is taken at each 52-week boundary on positive profit only, so the
    following year grows from the smaller after-tax balance. Losses are neither
    taxed nor refunded.
    """
    current_balance = principal
    total_tax_paid = 0.0
    total_contributions = 0.0

    for segment in _walk_segments(principal, weekly_rate, weeks, weekly_contribution, capital_gains_tax):
        total_tax_paid += segment.tax
        total_contributions += segment.contributions
        current_balance = segment.ending_balance

    profit_before_tax = current_balance + total_tax_paid - principal - total_contributions
    return WeeklyTaxResult(current_balance, profit_before_tax, total_tax_paid)


def summarize_weekly_tax(
    principal: float,
    weekly_rate: float,
    weeks: int,
    weekly_contribution: float,
    capital_gains_tax: float,
) -> WeeklyTaxSummary:
    """Taxed run plus the untaxed run it is compared against."""
    final_after_tax, profit_before_tax, total_tax_paid = calculate_weekly_with_yearly_tax(
        principal, weekly_rate, weeks, weekly_contribution, capital_gains_tax
    )
    final_without_tax = calculate_weekly_with_yearly_tax(
        principal, weekly_rate, weeks, weekly_contribution, 0.0
    ).final_after_tax

    total_contributions = weekly_contribution * weeks
    total_invested = principal + total_contributions
    after_tax_factor = growth_factor(final_after_tax, total_invested)

    if weeks > 0 and after_tax_factor > 0:
        annual_return = safe_pow(after_tax_factor, WEEKS_PER_YEAR / weeks) - 1.0
    else:
        annual_return = 0.0

    tax_impact = final_without_tax - final_after_tax
    return WeeklyTaxSummary(
        final_after_tax=final_after_tax,
        profit_before_tax=profit_before_tax,
        total_tax_paid=total_tax_paid,
        total_contributions=total_contributions,
        total_invested=total_invested,
        final_before_tax=final_after_tax + total_tax_paid,
        net_profit_after_tax=final_after_tax - total_invested,
        growth_factor_after_tax=after_tax_factor,
        effective_annual_return_after_tax=annual_return,
        final_without_tax=final_without_tax,
        tax_impact=tax_impact,
        tax_impact_share=tax_impact / final_without_tax if final_without_tax != 0 else 0.0,
    )


__all__ = [
    "WEEKS_PER_YEAR",
    "calculate_weekly_with_yearly_tax",
    "summarize_weekly_tax",
    "tax_drag_schedule",
]
