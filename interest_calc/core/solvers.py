"""Inverse solves of the growth formula.

The ``solve_*`` functions return ``None`` when no answer exists. The
``calculate_*`` wrappers keep the older convention of answering ``0.0``
instead, which is what the HTTP layer and existing callers compare against.
"""

from __future__ import annotations

import math
from typing import Optional

from interest_calc.core.numeric import safe_pow


def solve_time_to_target(
    principal: float,
    target_amount: float,
    annual_rate: float,
    compounds_per_year: int,
) -> Optional[float]:
    """Years for `principal` to grow to `target_amount`: ln(T/P) / (n ln(1 + r/n))."""
    if annual_rate <= 0 or principal <= 0 or target_amount <= principal:
        return None

    compounds = float(compounds_per_year)
    return math.log(target_amount / principal) / (compounds * math.log(1.0 + annual_rate / compounds))


def solve_principal_for_target(
    target_amount: float,
    annual_rate: float,
    compounds_per_year: int,
    years: float,
) -> Optional[float]:
    """Starting principal that grows to `target_amount` in `years`: T / (1 + r/n)^(nt)."""
    if annual_rate <= 0 or years <= 0:
        return None

    compounds = float(compounds_per_year)
    return target_amount / safe_pow(1.0 + annual_rate / compounds, compounds * years)


def calculate_time_to_target(
    principal: float,
    target_amount: float,
    annual_rate: float,
    compounds_per_year: int,
) -> float:
    years = solve_time_to_target(principal, target_amount, annual_rate, compounds_per_year)
    return 0.0 if years is None else years


def calculate_principal_for_target(
    target_amount: float,
    annual_rate: float,
    compounds_per_year: int,
    years: float,
) -> float:
    principal = solve_principal_for_target(target_amount, annual_rate, compounds_per_year, years)
    return 0.0 if principal is None else principal


__all__ = [
    "calculate_principal_for_target",
    "calculate_time_to_target",
    "solve_principal_for_target",
    "solve_time_to_target",
]
