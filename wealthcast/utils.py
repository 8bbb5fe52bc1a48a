"""General utilities for WealthCast

Contents
--------
- Validation helpers
- Rate conversions (annual nominal -> monthly, compounded growth factors)
- Finance helpers (realized annual growth)
- Reporting helpers (summary_metrics)
- Formatters (format_currency, millions_formatter)
"""

from __future__ import annotations

from typing import Mapping

import numpy as np
import pandas as pd

from .constants import MONTHS_PER_YEAR

__all__ = [
    # Validation
    "check_non_negative",
    "is_finite_number",
    # Rates
    "nominal_monthly_rate",
    "growth_factor",
    # Finance
    "realized_annual_growth",
    # Reporting
    "summary_metrics",
    # Formatters
    "millions_formatter",
    "format_currency",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_non_negative(name: str, value: float) -> None:
    """Raise if *value* is negative (strict)."""
    if value < 0:
        raise ValueError(f"{name} must be non-negative (got {value}).")


def is_finite_number(value: object) -> bool:
    """True for real numbers that are neither NaN nor infinite (bools excluded)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, (int, float, np.integer, np.floating)):
        return False
    return bool(np.isfinite(value))


# ---------------------------------------------------------------------------
# Rate conversions
# ---------------------------------------------------------------------------

def nominal_monthly_rate(r_annual: float) -> float:
    """Convert a nominal annual rate to its monthly rate.

    Uses simple division: r_annual / 12. Unlike compounded conversion this
    makes twelve months of growth at 12% equal 1.01 ** 12, not 1.12.
    """
    return float(r_annual) / MONTHS_PER_YEAR


def growth_factor(rate: float, years: int) -> float:
    """Compounded growth factor (1 + rate) ** years.

    Saturates to ``inf`` instead of raising when the factor overflows a float.
    """
    with np.errstate(over="ignore"):
        return float(np.power(np.float64(1.0 + rate), years))


# ---------------------------------------------------------------------------
# Finance helpers
# ---------------------------------------------------------------------------

def realized_annual_growth(
    initial: float,
    final: float,
    years: int,
    *,
    fallback: float,
) -> float:
    """Geometric mean annual growth implied by *final* / *initial* over *years*.

    Returns *fallback* when no realized rate is observable (initial <= 0 or
    years <= 0). Contributions are not netted out.
    """
    if initial <= 0 or years <= 0:
        return float(fallback)
    ratio = max(float(final) / float(initial), 0.0)
    return float(ratio ** (1.0 / years) - 1.0)


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------

def summary_metrics(results: Mapping[str, object]) -> pd.DataFrame:
    """Build a metrics table from a dict of ProjectionResult-like objects.

    Duck-typing: each value must have `.summary` with attributes
    (final_net_worth, net_worth_positive_year, debt_free_year,
    realized_growth).
    """
    rows = []
    for name, res in results.items():
        summary = getattr(res, "summary", None)
        if summary is None:
            continue
        rows.append(
            {
                "scenario": name,
                "final_net_worth": getattr(summary, "final_net_worth", np.nan),
                "net_worth_positive_year": _milestone_label(
                    getattr(summary, "net_worth_positive_year", None)
                ),
                "debt_free_year": _milestone_label(
                    getattr(summary, "debt_free_year", None)
                ),
                "realized_growth": getattr(summary, "realized_growth", np.nan),
            }
        )
    if not rows:
        return pd.DataFrame(columns=[
            "final_net_worth", "net_worth_positive_year", "debt_free_year", "realized_growth"
        ])
    return pd.DataFrame(rows).set_index("scenario").sort_index()


def _milestone_label(value: object) -> object:
    # Milestone sentinels are str enums; keep ints as ints
    return getattr(value, "value", value)


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def millions_formatter(x, pos):
    """
    Format axis values as millions for matplotlib FuncFormatter.

    - 25_000_000 → "25M"
    - 12_500_000 → "12.5M"
    - 0 → "0"
    """
    if x == 0:
        return '0'
    val = x / 1e6
    return f'{val:.0f}M' if val == int(val) else f'{val:.1f}M'


def format_currency(value, decimals=0, symbol='$'):
    """
    Format a monetary value with thousands separators.

    Examples
    --------
    >>> format_currency(1234567.8)
    '$1,234,568'
    >>> format_currency(-2500, decimals=2, symbol='€')
    '-€2,500.00'
    """
    sign = '-' if value < 0 else ''
    return f'{sign}{symbol}{abs(value):,.{decimals}f}'
