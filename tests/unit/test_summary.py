"""
Unit tests for summary.py module.

Tests milestone detection, realized growth and the empty-trajectory fallbacks.
"""

import pytest

from wealthcast.simulation import simulate
from wealthcast.summary import Milestone, net_worth_milestones, summarize


class TestSummarize:
    """Tests for summarize."""

    def test_final_net_worth_is_last_year(self, make_profile):
        profile = make_profile(horizon=4, initial_investment=1_000, monthly_investment=50)
        snapshots = simulate(profile)

        assert summarize(snapshots, profile).final_net_worth == snapshots[-1].net_worth

    def test_positive_and_debt_free_years(self, make_profile):
        profile = make_profile(
            horizon=5,
            monthly_investment=100,
            current_debt=3_000,
            monthly_debt_payment=100,
        )
        summary = summarize(simulate(profile), profile)

        # Year 1: 1,200 - 1,800 < 0; year 2: 2,400 - 600 >= 0
        assert summary.net_worth_positive_year == 2
        assert summary.debt_free_year == 3

    def test_positive_from_year_one(self, make_profile):
        profile = make_profile(horizon=3, initial_investment=100)
        assert summarize(simulate(profile), profile).net_worth_positive_year == 1

    def test_zero_net_worth_counts_as_positive(self, make_profile):
        profile = make_profile(horizon=2)
        assert summarize(simulate(profile), profile).net_worth_positive_year == 1

    def test_never_positive(self, make_profile):
        profile = make_profile(horizon=3, current_debt=50_000, monthly_debt_payment=10)
        summary = summarize(simulate(profile), profile)

        assert summary.net_worth_positive_year is Milestone.NEVER
        assert summary.debt_free_year is Milestone.NEVER

    def test_already_debt_free(self, make_profile):
        profile = make_profile(horizon=3, initial_investment=500)
        assert summarize(simulate(profile), profile).debt_free_year is Milestone.ALREADY_DEBT_FREE

    def test_debt_free_after_ten_years(self, make_profile):
        profile = make_profile(
            horizon=15, current_debt=10_000, monthly_debt_payment=1_000 / 12
        )
        assert summarize(simulate(profile), profile).debt_free_year == 10

    def test_realized_growth(self, make_profile):
        profile = make_profile(horizon=1, initial_investment=10_000, investment_return=0.12)
        summary = summarize(simulate(profile), profile)

        assert summary.realized_growth == pytest.approx(1.01 ** 12 - 1)

    def test_realized_growth_multi_year(self, make_profile):
        profile = make_profile(horizon=10, initial_investment=10_000, investment_return=0.06)
        summary = summarize(simulate(profile), profile)

        assert summary.realized_growth == pytest.approx(1.005 ** 12 - 1)

    def test_realized_growth_fallback_without_initial(self, make_profile):
        profile = make_profile(horizon=5, monthly_investment=100, investment_return=0.07)
        assert summarize(simulate(profile), profile).realized_growth == pytest.approx(0.07)

    def test_empty_trajectory(self, make_profile):
        profile = make_profile(
            horizon=0, initial_investment=4_000, investment_return=0.05,
            current_debt=1_000, monthly_debt_payment=100,
        )
        summary = summarize([], profile)

        assert summary.final_net_worth == pytest.approx(3_000)
        assert summary.net_worth_positive_year is Milestone.NEVER
        assert summary.debt_free_year is Milestone.NEVER
        assert summary.realized_growth == pytest.approx(0.05)

    def test_milestone_sentinels_are_strings(self):
        assert Milestone.NEVER == "never"
        assert Milestone.ALREADY_DEBT_FREE.value == "already_debt_free"


class TestNetWorthMilestones:
    """Tests for net_worth_milestones."""

    def test_first_year_reached(self, make_profile):
        profile = make_profile(horizon=10, monthly_investment=1_000)
        milestones = net_worth_milestones(simulate(profile), [50_000, 100_000, 200_000])

        assert milestones == {
            50_000.0: 5,
            100_000.0: 9,
            200_000.0: Milestone.NEVER,
        }

    def test_empty_trajectory(self):
        assert net_worth_milestones([], [1_000]) == {1_000.0: Milestone.NEVER}

    def test_no_targets(self, make_profile):
        assert net_worth_milestones(simulate(make_profile()), []) == {}
