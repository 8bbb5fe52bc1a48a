"""
Command-Line Interface for WealthCast.

Purpose
-------
Provides a user-friendly CLI for running projections from a profile file
without writing Python code.

Commands
--------
- project: Project a profile and print the summary (optionally three cases)
- config validate: Check that a profile file normalizes cleanly
- config show: Print the active application settings

Example Usage
-------------
    # Project a profile and save the trajectory
    $ wealthcast project --config profile.json --output results/

    # Expected / optimistic / pessimistic returns with a chart
    $ wealthcast project -c profile.json --cases --plot cases.png

    # Validate a profile file
    $ wealthcast config validate profile.json

    # Show version
    $ wealthcast --version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config import AppSettings, ScenarioConfig
from .exceptions import ConfigurationError, InvalidInputError
from .summary import Milestone
from .utils import format_currency

# Version
__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings, quiet: bool) -> None:
    level = "DEBUG" if settings.debug else settings.log_level
    if quiet and level in ("DEBUG", "INFO"):
        level = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _year_label(value) -> str:
    if value is Milestone.NEVER:
        return "not within horizon"
    if value is Milestone.ALREADY_DEBT_FREE:
        return "already debt-free"
    return f"year {value}"


@click.group()
@click.version_option(version=__version__, prog_name="wealthcast")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    WealthCast - Multi-year net worth projection.

    Projects income, expenses, investments and debt payoff year by year
    from a household financial profile.

    Use 'wealthcast COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    _configure_logging(settings, quiet)
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()


@main.command()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to profile file (JSON)"
)
@click.option(
    "--mode", "-m",
    type=click.Choice(["single", "dual"]),
    default=None,
    help="Household mode (default: taken from the profile file, else single)"
)
@click.option(
    "--output", "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Output directory for results"
)
@click.option(
    "--cases",
    is_flag=True,
    help="Also run optimistic and pessimistic return cases"
)
@click.option(
    "--optimistic-delta",
    type=float,
    default=None,
    help="Return spread for the optimistic case (default: 0.03)"
)
@click.option(
    "--pessimistic-delta",
    type=float,
    default=None,
    help="Return spread for the pessimistic case (default: 0.03)"
)
@click.option(
    "--plot",
    "plot_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Save a PNG chart of the projection to this path"
)
@click.pass_context
def project(
    ctx: click.Context,
    config: Path,
    mode: Optional[str],
    output: Optional[Path],
    cases: bool,
    optimistic_delta: Optional[float],
    pessimistic_delta: Optional[float],
    plot_path: Optional[Path],
) -> None:
    """
    Project a household profile.

    Example:
        wealthcast project -c profile.json --cases -o results/
    """
    console: Console = ctx.obj["console"]
    quiet = ctx.obj.get("quiet", False)
    settings: AppSettings = ctx.obj["settings"]

    from .profile import normalize_profile
    from .projection import ProjectionEngine
    from .serialization import load_profile, save_result, save_results
    from .utils import summary_metrics

    try:
        raw, file_mode = load_profile(config)
        profile = normalize_profile(
            raw,
            mode or file_mode,
            default_debt_rate=settings.default_debt_rate,
            default_inflation_rate=settings.default_inflation_rate,
        )
    except ConfigurationError as e:
        click.echo(f"Error loading profile: {e}", err=True)
        sys.exit(1)
    except InvalidInputError as e:
        click.echo(f"Invalid profile ({e.kind.value}): {e}", err=True)
        sys.exit(1)

    overrides = {}
    if optimistic_delta is not None:
        overrides["optimistic_delta"] = optimistic_delta
    if pessimistic_delta is not None:
        overrides["pessimistic_delta"] = pessimistic_delta
    try:
        scenario = ScenarioConfig(**overrides)
    except ValueError as e:
        click.echo(f"Invalid scenario options: {e}", err=True)
        sys.exit(1)

    engine = ProjectionEngine(profile, scenario)
    results = engine.run_three_cases() if cases else {"expected": engine.run()}
    expected = results["expected"]
    summary = expected.summary
    symbol = settings.currency_symbol

    if not quiet:
        table = Table(title="Projection Summary", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green", justify="right")

        table.add_row("Horizon", f"{profile.horizon} years")
        table.add_row("Household", profile.mode.value)
        table.add_row("", "")
        table.add_row("Final Net Worth", format_currency(summary.final_net_worth, symbol=symbol))
        if profile.inflation_rate > 0 and expected.snapshots:
            table.add_row(
                "Final Net Worth (today's money)",
                format_currency(expected.snapshots[-1].net_worth_real, symbol=symbol),
            )
        table.add_row("Net Worth Positive", _year_label(summary.net_worth_positive_year))
        table.add_row("Debt-Free", _year_label(summary.debt_free_year))
        table.add_row("Realized Growth", f"{summary.realized_growth:.2%}")
        console.print(table)

        reached = [
            (target, year) for target, year in expected.milestones.items()
            if year is not Milestone.NEVER
        ]
        if reached:
            milestones = Table(title="Net Worth Milestones", show_header=True)
            milestones.add_column("Target", style="cyan", justify="right")
            milestones.add_column("Reached", style="green")
            for target, year in reached:
                milestones.add_row(format_currency(target, symbol=symbol), _year_label(year))
            console.print(milestones)

        if cases:
            frame = summary_metrics(results)
            comparison = Table(title="Return Scenarios", show_header=True)
            comparison.add_column("Case", style="cyan")
            comparison.add_column("Final Net Worth", style="green", justify="right")
            comparison.add_column("Realized Growth", justify="right")
            for name, row in frame.iterrows():
                comparison.add_row(
                    str(name),
                    format_currency(row["final_net_worth"], symbol=symbol),
                    f"{row['realized_growth']:.2%}",
                )
            console.print(comparison)
    else:
        click.echo(f"Final Net Worth: {format_currency(summary.final_net_worth, symbol=symbol)}")

    if output:
        output.mkdir(parents=True, exist_ok=True)
        if cases:
            result_file = output / "projection_cases.json"
            save_results(results, result_file)
        else:
            result_file = output / "projection_result.json"
            save_result(expected, result_file)
        if not quiet:
            click.echo(f"Results saved to {result_file}")

    if plot_path:
        import matplotlib
        matplotlib.use("Agg")
        from .plotting import plot_cases, plot_trajectory

        if cases:
            plot_cases(results, save_path=str(plot_path))
        else:
            plot_trajectory(expected, save_path=str(plot_path))
        if not quiet:
            click.echo(f"Chart saved to {plot_path}")


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------

@main.group()
def config() -> None:
    """Profile and settings utilities."""


@config.command("validate")
@click.argument("path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--mode", "-m",
    type=click.Choice(["single", "dual"]),
    default=None,
    help="Household mode to validate against"
)
@click.pass_context
def validate(ctx: click.Context, path: Path, mode: Optional[str]) -> None:
    """
    Validate a profile file.

    Example:
        wealthcast config validate profile.json
    """
    from .profile import normalize_profile
    from .serialization import load_profile

    settings: AppSettings = ctx.obj["settings"]
    try:
        raw, file_mode = load_profile(path)
        profile = normalize_profile(
            raw,
            mode or file_mode,
            default_debt_rate=settings.default_debt_rate,
            default_inflation_rate=settings.default_inflation_rate,
        )
    except ConfigurationError as e:
        click.echo(f"Error loading profile: {e}", err=True)
        sys.exit(1)
    except InvalidInputError as e:
        click.echo(f"✗ Invalid ({e.kind.value}): {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Profile is valid: {path}")
    if not ctx.obj.get("quiet", False):
        click.echo(f"  Household: {profile.mode.value}")
        click.echo(f"  Horizon: {profile.horizon} years")
        click.echo(f"  Debt rate: {profile.debt_rate:.2%}")


@config.command("show")
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show the active settings (environment and .env applied)."""
    settings: AppSettings = ctx.obj["settings"]
    console: Console = ctx.obj["console"]

    table = Table(title="WealthCast Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":
    main()
