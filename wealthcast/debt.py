"""
Debt amortization for WealthCast.

One call covers one simulated year: twelve monthly steps of

    interest_m  = B_m * r / 12
    B_m'        = B_m + interest_m
    payment_m   = min(P, B_m')
    B_{m+1}     = B_m' - payment_m

Payments cover accrued interest first, the remainder reduces principal.
A payment smaller than the accrual capitalizes the unpaid interest
(negative amortization) instead of failing. Once the balance reaches zero
it stays there and no further payments are made that year.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .constants import BALANCE_EPSILON, MONTHS_PER_YEAR
from .utils import nominal_monthly_rate

__all__ = ["AmortizationResult", "amortize_year"]

logger = logging.getLogger(__name__)


class AmortizationResult(NamedTuple):
    ending_principal: float
    interest_paid: float
    total_paid: float


def amortize_year(
    principal: float,
    monthly_payment: float,
    annual_rate: float,
) -> AmortizationResult:
    """
    Apply twelve months of payments to a debt balance.

    Parameters
    ----------
    principal : float
        Balance at the start of the year.
    monthly_payment : float
        Scheduled payment per month.
    annual_rate : float
        Nominal annual interest rate, accrued monthly at ``rate / 12``.

    Returns
    -------
    AmortizationResult
        ``(ending_principal, interest_paid, total_paid)``. ``interest_paid``
        counts only the interest covered by payments; capitalized interest is
        part of ``ending_principal``. ``total_paid`` is the cash actually paid,
        which falls short of 12 payments when the debt is cleared mid-year.

    Examples
    --------
    >>> amortize_year(1_200.0, 100.0, 0.0)
    AmortizationResult(ending_principal=0.0, interest_paid=0.0, total_paid=1200.0)
    """
    balance = max(float(principal), 0.0)
    if balance <= BALANCE_EPSILON:
        return AmortizationResult(0.0, 0.0, 0.0)

    r_m = nominal_monthly_rate(annual_rate)
    interest_paid = 0.0
    total_paid = 0.0
    for month in range(MONTHS_PER_YEAR):
        if balance <= BALANCE_EPSILON:
            balance = 0.0
            break
        interest = balance * r_m
        balance += interest
        payment = min(monthly_payment, balance)
        interest_paid += min(payment, interest)
        total_paid += payment
        if payment < interest:
            logger.debug(
                "Negative amortization in month %d: payment %.2f < interest %.2f",
                month + 1, payment, interest,
            )
        balance -= payment

    if balance <= BALANCE_EPSILON:
        balance = 0.0
    return AmortizationResult(balance, interest_paid, total_paid)
