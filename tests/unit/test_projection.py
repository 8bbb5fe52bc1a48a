"""
Unit tests for projection.py module.

Tests the raw-profile entry point, ProjectionResult helpers and the
three-case ProjectionEngine.
"""

import pandas as pd
import pytest

from wealthcast.config import AppSettings, ScenarioConfig
from wealthcast.exceptions import InputErrorKind, InvalidInputError
from wealthcast.projection import ProjectionEngine, ProjectionResult, project, run_projection
from wealthcast.summary import Milestone


class TestProject:
    """Tests for the project entry point."""

    def test_form_profile(self, form_profile):
        result = project(form_profile, "single")

        assert isinstance(result, ProjectionResult)
        assert len(result) == 20
        assert result.final_net_worth == result.snapshots[-1].net_worth
        assert result.summary.debt_free_year is Milestone.ALREADY_DEBT_FREE
        assert result.summary.net_worth_positive_year == 1

    def test_single_year_compounding(self):
        raw = {
            "years": 1, "age1": 30, "income1": 0,
            "initialInvestment": 12_000, "monthlyInvestment": 0,
            "investmentReturn": 0.12, "monthlyExpenses": 0, "expenseGrowth": 0,
        }
        result = project(raw)
        assert result.snapshots[0].investment_balance == pytest.approx(12_000 * 1.01 ** 12)

    def test_invalid_profile_raises(self, form_profile):
        form_profile["years"] = 0
        with pytest.raises(InvalidInputError) as exc_info:
            project(form_profile)
        assert exc_info.value.kind is InputErrorKind.NON_POSITIVE_HORIZON

    def test_settings_supply_default_rates(self, form_profile):
        form_profile["currentDebt"] = 10_000
        form_profile["monthlyDebtPayment"] = 100
        settings = AppSettings(default_debt_rate=0.12, default_inflation_rate=0.03)

        result = project(form_profile, settings=settings)

        assert result.profile.debt_rate == pytest.approx(0.12)
        assert result.profile.inflation_rate == pytest.approx(0.03)
        assert result.snapshots[0].interest_paid > 0

    def test_custom_milestone_targets(self, form_profile):
        result = project(form_profile, milestone_targets=[1.0, 1e12])

        assert result.milestones[1.0] == 1
        assert result.milestones[1e12] is Milestone.NEVER

    def test_default_milestone_targets(self, form_profile):
        result = project(form_profile)
        assert 100_000.0 in result.milestones
        assert 5_000_000.0 in result.milestones


class TestProjectionResult:
    """Tests for ProjectionResult helpers."""

    def test_to_frame(self, form_profile):
        frame = project(form_profile).to_frame()

        assert isinstance(frame, pd.DataFrame)
        assert frame.index.name == "year"
        assert list(frame.index) == list(range(1, 21))
        assert "net_worth" in frame.columns
        assert frame.loc[20, "net_worth"] == pytest.approx(project(form_profile).final_net_worth)

    def test_to_frame_empty(self, make_profile):
        frame = run_projection(make_profile(horizon=0)).to_frame()

        assert frame.empty
        assert frame.index.name == "year"
        assert "net_worth" in frame.columns

    def test_run_projection_zero_horizon(self, make_profile):
        result = run_projection(make_profile(horizon=0, initial_investment=2_000))

        assert len(result) == 0
        assert result.final_net_worth == pytest.approx(2_000)


class TestProjectionEngine:
    """Tests for the three-case engine."""

    def test_run_matches_run_projection(self, make_profile):
        profile = make_profile(horizon=5, initial_investment=1_000, investment_return=0.05)
        engine = ProjectionEngine(profile)

        assert engine.run().snapshots == run_projection(profile).snapshots

    def test_three_cases(self, make_profile):
        profile = make_profile(
            horizon=10, initial_investment=10_000, monthly_investment=200,
            investment_return=0.06,
        )
        results = ProjectionEngine(profile).run_three_cases()

        assert set(results) == {"expected", "optimistic", "pessimistic"}
        assert results["optimistic"].profile.investment_return == pytest.approx(0.09)
        assert results["pessimistic"].profile.investment_return == pytest.approx(0.03)
        assert (
            results["pessimistic"].final_net_worth
            < results["expected"].final_net_worth
            < results["optimistic"].final_net_worth
        )

    def test_custom_deltas(self, make_profile):
        profile = make_profile(horizon=1, investment_return=0.05)
        config = ScenarioConfig(optimistic_delta=0.02, pessimistic_delta=0.04)
        results = ProjectionEngine(profile, config).run_three_cases()

        assert results["optimistic"].profile.investment_return == pytest.approx(0.07)
        assert results["pessimistic"].profile.investment_return == pytest.approx(0.01)

    def test_pessimistic_return_floor(self, make_profile):
        profile = make_profile(horizon=1, investment_return=-0.98)
        results = ProjectionEngine(profile).run_three_cases()

        assert results["pessimistic"].profile.investment_return == pytest.approx(-0.99)
        assert results["pessimistic"].profile.investment_return > -1

    def test_pessimistic_never_above_expected(self, make_profile):
        profile = make_profile(horizon=1, investment_return=-0.995)
        results = ProjectionEngine(profile).run_three_cases()

        assert results["pessimistic"].profile.investment_return == pytest.approx(-0.995)

    def test_profile_unchanged(self, make_profile):
        profile = make_profile(investment_return=0.05)
        ProjectionEngine(profile).run_three_cases()
        assert profile.investment_return == 0.05

    def test_cases_use_config_targets(self, make_profile):
        profile = make_profile(horizon=2, monthly_investment=1_000)
        config = ScenarioConfig(milestone_targets=[20_000, 10_000])
        result = ProjectionEngine(profile, config).run()

        assert list(result.milestones) == [10_000.0, 20_000.0]
        assert result.milestones[10_000.0] == 1
        assert result.milestones[20_000.0] == 2


class TestProjectionResultImmutability:
    """ProjectionResult is a hashable, read-only value."""

    def test_hashable(self, form_profile):
        result = project(form_profile)
        assert hash(result) == hash(project(form_profile))

    def test_milestones_read_only(self, form_profile):
        result = project(form_profile)
        with pytest.raises(TypeError):
            result.milestones[100_000.0] = 1

    def test_milestone_years_pairs(self, form_profile):
        result = project(form_profile, milestone_targets=[1.0])
        assert result.milestone_years == ((1.0, 1),)


class TestProjectInputErrors:
    """Every rejected input surfaces as InvalidInputError."""

    def test_unknown_mode(self, form_profile):
        with pytest.raises(InvalidInputError) as exc_info:
            project(form_profile, "triple")
        assert exc_info.value.kind is InputErrorKind.INVALID_HOUSEHOLD_MODE

    def test_extreme_growth_projects(self, form_profile):
        form_profile.update(years=60, incomeGrowth=1e6, expenseGrowth=1e6, inflationRate=1e6)
        result = project(form_profile, "single")

        assert len(result) == 60
        assert result.summary.net_worth_positive_year == 1
