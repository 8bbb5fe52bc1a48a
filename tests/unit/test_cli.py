"""
Unit tests for CLI module.

Tests command-line interface functionality using Click's testing utilities.
"""

import json

import pytest
from click.testing import CliRunner

from wealthcast.cli import __version__, main


# ============================================================================
# FIXTURES
# ============================================================================

@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def bare_profile_file(tmp_path, form_profile):
    """Bare form profile without wrapper."""
    path = tmp_path / "form.json"
    with open(path, "w") as f:
        json.dump(form_profile, f)
    return path


@pytest.fixture
def invalid_profile_file(tmp_path, form_profile):
    """Profile rejected by the normalizer (horizon 0)."""
    form_profile["years"] = 0
    path = tmp_path / "invalid.json"
    with open(path, "w") as f:
        json.dump(form_profile, f)
    return path


# ============================================================================
# BASIC CLI TESTS
# ============================================================================

class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "WealthCast" in result.output
        assert "project" in result.output
        assert "config" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "wealthcast" in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(main, ["simulate"])
        assert result.exit_code != 0


# ============================================================================
# PROJECT COMMAND TESTS
# ============================================================================

class TestProjectCommand:
    """Test the project command."""

    def test_project_summary(self, runner, profile_file):
        result = runner.invoke(main, ["project", "--config", str(profile_file)])

        assert result.exit_code == 0, result.output
        assert "Projection Summary" in result.output
        assert "Final Net Worth" in result.output
        assert "Debt-Free" in result.output

    def test_project_quiet(self, runner, bare_profile_file):
        result = runner.invoke(main, ["--quiet", "project", "-c", str(bare_profile_file)])

        assert result.exit_code == 0, result.output
        assert "Final Net Worth: $" in result.output
        assert "Projection Summary" not in result.output

    def test_project_mode_override(self, runner, profile_file, tmp_path):
        output = tmp_path / "results"
        result = runner.invoke(
            main,
            ["project", "-c", str(profile_file), "--mode", "single", "-o", str(output)],
        )

        assert result.exit_code == 0, result.output
        with open(output / "projection_result.json") as f:
            data = json.load(f)
        assert data["profile"]["mode"] == "single"

    def test_project_output(self, runner, profile_file, tmp_path):
        output = tmp_path / "results"
        result = runner.invoke(main, ["project", "-c", str(profile_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Results saved" in result.output
        with open(output / "projection_result.json") as f:
            data = json.load(f)
        assert len(data["trajectory"]) == 20
        assert data["profile"]["mode"] == "dual"

    def test_project_cases(self, runner, profile_file, tmp_path):
        output = tmp_path / "results"
        result = runner.invoke(
            main, ["project", "-c", str(profile_file), "--cases", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert "Return Scenarios" in result.output
        with open(output / "projection_cases.json") as f:
            data = json.load(f)
        assert set(data["cases"]) == {"expected", "optimistic", "pessimistic"}

    def test_project_invalid_delta(self, runner, profile_file):
        result = runner.invoke(
            main, ["project", "-c", str(profile_file), "--cases", "--optimistic-delta=-0.5"]
        )

        assert result.exit_code == 1
        assert "Invalid scenario options" in result.output

    def test_project_invalid_profile(self, runner, invalid_profile_file):
        result = runner.invoke(main, ["project", "-c", str(invalid_profile_file)])

        assert result.exit_code == 1
        assert "NonPositiveHorizon" in result.output

    def test_project_malformed_file(self, runner, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(main, ["project", "-c", str(path)])

        assert result.exit_code == 1
        assert "Error loading profile" in result.output

    def test_project_unknown_mode(self, runner, tmp_path, form_profile):
        path = tmp_path / "family.json"
        path.write_text(json.dumps(dict(form_profile, mode="family")), encoding="utf-8")
        result = runner.invoke(main, ["project", "-c", str(path)])

        assert result.exit_code == 1
        assert "InvalidHouseholdMode" in result.output

    def test_project_extreme_growth(self, runner, tmp_path, form_profile):
        path = tmp_path / "extreme.json"
        path.write_text(
            json.dumps(dict(form_profile, years=60, incomeGrowth=1e6)), encoding="utf-8"
        )
        output = tmp_path / "results"
        result = runner.invoke(main, ["project", "-c", str(path), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert (output / "projection_result.json").exists()

    def test_project_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["project", "-c", str(tmp_path / "nope.json")])
        assert result.exit_code != 0

    def test_project_plot(self, runner, profile_file, tmp_path):
        chart = tmp_path / "chart.png"
        result = runner.invoke(main, ["project", "-c", str(profile_file), "--plot", str(chart)])

        assert result.exit_code == 0, result.output
        assert chart.exists()

    def test_project_cases_plot(self, runner, profile_file, tmp_path):
        chart = tmp_path / "cases.png"
        result = runner.invoke(
            main, ["-q", "project", "-c", str(profile_file), "--cases", "--plot", str(chart)]
        )

        assert result.exit_code == 0, result.output
        assert chart.exists()


# ============================================================================
# CONFIG COMMAND TESTS
# ============================================================================

class TestConfigCommands:
    """Test config validate / show."""

    def test_validate_valid(self, runner, profile_file):
        result = runner.invoke(main, ["config", "validate", str(profile_file)])

        assert result.exit_code == 0
        assert "Profile is valid" in result.output
        assert "dual" in result.output

    def test_validate_invalid(self, runner, invalid_profile_file):
        result = runner.invoke(main, ["config", "validate", str(invalid_profile_file)])

        assert result.exit_code == 1
        assert "Invalid (NonPositiveHorizon)" in result.output

    def test_validate_dual_missing_income(self, runner, bare_profile_file):
        result = runner.invoke(
            main, ["config", "validate", str(bare_profile_file), "--mode", "dual"]
        )

        assert result.exit_code == 1
        assert "MissingRequiredField" in result.output

    def test_show(self, runner, monkeypatch):
        monkeypatch.setenv("WEALTHCAST_CURRENCY_SYMBOL", "€")
        result = runner.invoke(main, ["config", "show"])

        assert result.exit_code == 0
        assert "WealthCast Settings" in result.output
        assert "currency_symbol" in result.output
        assert "€" in result.output
