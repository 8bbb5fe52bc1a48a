"""Year-by-year projection simulator for WealthCast

Turns a normalized ``Profile`` into a trajectory of ``YearSnapshot`` values,
one per simulated year. For year t (1-indexed):

    income_t   = (income1 + income2) * (1 + g_income)^(t-1) + bonus + other
    expenses_t = monthly_expenses * 12 * (1 + g_expense)^(t-1)
    debt_t     = amortize_year(debt_{t-1}, payment, debt_rate)
    W_t        = 12 monthly steps of  W <- W * (1 + r/12) + contribution

Contributions follow the ordinary-annuity convention: each month's
contribution is credited after that month's growth. Payments that would
exceed an already repaid debt are not redirected into investments.

Design goals
------------
- Pure and deterministic: no randomness, no I/O, no shared state.
- Never raises on a normalized profile; ``horizon == 0`` yields ``[]``.

Typical usage
-------------
>>> from wealthcast.profile import normalize_profile
>>> profile = normalize_profile(raw, "single")
>>> trajectory = simulate(profile)
>>> trajectory[-1].net_worth
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List

from .constants import MONTHS_PER_YEAR
from .debt import amortize_year
from .profile import Profile
from .utils import growth_factor, nominal_monthly_rate

__all__ = [
    "YearSnapshot",
    "simulate",
    "grow_investments",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class YearSnapshot:
    """Financial state at the end of one simulated year."""
    year: int
    age: int
    gross_income: float
    living_expenses: float
    debt_payment: float
    contributions: float
    net_cash_flow: float
    investment_balance: float
    debt_balance: float
    interest_paid: float
    cumulative_interest: float
    net_worth: float
    # Running totals since the start of the projection
    total_contributed: float
    investment_growth: float
    net_worth_real: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def grow_investments(balance: float, monthly_contribution: float, annual_return: float) -> float:
    """Apply one year of monthly growth with end-of-month contributions."""
    r_m = nominal_monthly_rate(annual_return)
    for _ in range(MONTHS_PER_YEAR):
        balance = balance * (1.0 + r_m) + monthly_contribution
    return balance


def _grown(amount: float, rate: float, years: int) -> float:
    # 0 * inf is nan; a zero amount stays zero at any growth rate
    if amount == 0:
        return 0.0
    return amount * growth_factor(rate, years)


def simulate(profile: Profile) -> List[YearSnapshot]:
    """Simulate ``profile.horizon`` years and return the ordered trajectory."""
    snapshots: List[YearSnapshot] = []
    investments = profile.initial_investment
    debt = profile.current_debt
    annual_contribution = profile.monthly_investment * MONTHS_PER_YEAR
    total_contributed = 0.0
    cumulative_interest = 0.0

    for year in range(1, profile.horizon + 1):
        income = (
            _grown(profile.salary_income, profile.income_growth, year - 1)
            + profile.bonus_income
            + profile.other_income
        )
        expenses = _grown(
            profile.monthly_expenses * MONTHS_PER_YEAR, profile.expense_growth, year - 1
        )

        amort = amortize_year(debt, profile.monthly_debt_payment, profile.debt_rate)
        debt = amort.ending_principal
        cumulative_interest += amort.interest_paid

        investments = grow_investments(
            investments, profile.monthly_investment, profile.investment_return
        )
        total_contributed += annual_contribution

        net_worth = investments - debt
        snapshots.append(
            YearSnapshot(
                year=year,
                age=profile.age1 + year,
                gross_income=income,
                living_expenses=expenses,
                debt_payment=amort.total_paid,
                contributions=annual_contribution,
                net_cash_flow=income - expenses - amort.total_paid - annual_contribution,
                investment_balance=investments,
                debt_balance=debt,
                interest_paid=amort.interest_paid,
                cumulative_interest=cumulative_interest,
                net_worth=net_worth,
                total_contributed=total_contributed,
                investment_growth=investments - profile.initial_investment - total_contributed,
                net_worth_real=net_worth / growth_factor(profile.inflation_rate, year),
            )
        )

    logger.debug("Simulated %d years", len(snapshots))
    return snapshots
