"""
Pytest configuration and fixtures for WealthCast test suite.

This module provides reusable fixtures for testing all WealthCast components.
Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

import json
from typing import Any, Dict

import pytest

from wealthcast.profile import HouseholdMode, Profile


# ---------------------------------------------------------------------------
# Raw Profile Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def form_profile() -> Dict[str, Any]:
    """
    Raw single-earner profile as posted by the web form (camelCase keys).

    Optional fields (bonus, other income, debt) are absent.
    """
    return {
        "years": 20,
        "age1": 30,
        "income1": 60_000,
        "initialInvestment": 20_000,
        "monthlyInvestment": 1_000,
        "investmentReturn": 0.06,
        "monthlyExpenses": 2_500,
        "expenseGrowth": 0.02,
    }


@pytest.fixture
def couple_profile(form_profile) -> Dict[str, Any]:
    """Dual-earner raw profile with debt and a bonus."""
    raw = dict(form_profile)
    raw.update(
        {
            "age2": 28,
            "income2": 50_000,
            "bonusIncome": 5_000,
            "incomeGrowth": 0.03,
            "currentDebt": 30_000,
            "monthlyDebtPayment": 600,
            "debtRate": 0.05,
        }
    )
    return raw


# ---------------------------------------------------------------------------
# Profile Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_profile():
    """
    Factory for normalized profiles.

    Every field defaults to zero (single earner, age 30, 1-year horizon) so
    tests only state the assumptions they exercise.
    """
    def _make(**overrides) -> Profile:
        fields: Dict[str, Any] = dict(
            horizon=1,
            mode=HouseholdMode.SINGLE,
            age1=30,
            income1=0.0,
            initial_investment=0.0,
            monthly_investment=0.0,
            investment_return=0.0,
            monthly_expenses=0.0,
            expense_growth=0.0,
        )
        fields.update(overrides)
        return Profile(**fields)

    return _make


# ---------------------------------------------------------------------------
# File Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def profile_file(tmp_path, couple_profile):
    """Wrapped profile document on disk (dual mode)."""
    path = tmp_path / "profile.json"
    with open(path, "w") as f:
        json.dump(
            {"schema_version": "0.1.0", "mode": "dual", "profile": couple_profile},
            f,
        )
    return path
