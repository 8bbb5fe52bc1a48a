"""
Global constants for WealthCast.

Purpose
-------
Centralizes default values and magic numbers used throughout the WealthCast
codebase. Using constants instead of hardcoded values improves maintainability,
ensures consistency, and makes configuration intentions explicit.

Usage
-----
>>> from wealthcast.constants import DEFAULT_DEBT_RATE, MONTHS_PER_YEAR
>>>
>>> monthly_rate = DEFAULT_DEBT_RATE / MONTHS_PER_YEAR

Categories
----------
- Time: months per year
- Rates: debt and inflation defaults
- Numerics: balance snapping tolerance
- Scenarios: three-case return spreads, net-worth milestone targets
- Plotting: figure sizes, line widths
"""

from typing import Tuple

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    # Rates
    "DEFAULT_DEBT_RATE",
    "DEFAULT_INFLATION_RATE",
    "MIN_RATE_EXCLUSIVE",
    # Numerics
    "BALANCE_EPSILON",
    # Scenarios
    "DEFAULT_OPTIMISTIC_DELTA",
    "DEFAULT_PESSIMISTIC_DELTA",
    "MIN_CASE_RETURN",
    "DEFAULT_MILESTONE_TARGETS",
    # Plotting
    "DEFAULT_FIGSIZE",
    "DEFAULT_FIGSIZE_WIDE",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_LINEWIDTH_THICK",
    "DEFAULT_ALPHA_BANDS",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Compounding sub-periods per simulated year."""


# =============================================================================
# Rate Defaults
# =============================================================================

DEFAULT_DEBT_RATE: float = 0.0
"""Nominal annual debt interest rate used when a profile does not state one.

At 0.0 debt payments are pure principal reduction."""

DEFAULT_INFLATION_RATE: float = 0.0
"""Annual inflation used to deflate net worth into today's money."""

MIN_RATE_EXCLUSIVE: float = -1.0
"""Growth and return rates must be strictly greater than this (-100%/year)."""


# =============================================================================
# Numerics
# =============================================================================

BALANCE_EPSILON: float = 1e-9
"""Debt balances at or below this are treated as fully repaid."""


# =============================================================================
# Scenario Defaults
# =============================================================================

DEFAULT_OPTIMISTIC_DELTA: float = 0.03
"""Added to the expected return for the optimistic case (7% -> 10%)."""

DEFAULT_PESSIMISTIC_DELTA: float = 0.03
"""Subtracted from the expected return for the pessimistic case (7% -> 4%)."""

MIN_CASE_RETURN: float = -0.99
"""Floor for the pessimistic case so its return stays above -100%."""

DEFAULT_MILESTONE_TARGETS: Tuple[float, ...] = (
    100_000.0,
    250_000.0,
    500_000.0,
    1_000_000.0,
    2_000_000.0,
    5_000_000.0,
)
"""Net-worth amounts reported in the milestone table."""


# =============================================================================
# Plotting Defaults
# =============================================================================

DEFAULT_FIGSIZE: Tuple[int, int] = (12, 6)
"""Default figure size for single-panel plots (width, height) in inches."""

DEFAULT_FIGSIZE_WIDE: Tuple[int, int] = (14, 8)
"""Figure size for the two-panel trajectory plot."""

DEFAULT_LINEWIDTH: float = 1.5
"""Standard line width for plots."""

DEFAULT_LINEWIDTH_THICK: float = 2.5
"""Line width for the headline net-worth series."""

DEFAULT_ALPHA_BANDS: float = 0.2
"""Transparency of the optimistic/pessimistic band."""
