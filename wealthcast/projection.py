"""Projection entry point for WealthCast

Connects ``profile.py``, ``simulation.py`` and ``summary.py`` into the single
call a presentation layer makes: raw profile in, ``ProjectionResult`` out.

    raw -> normalize_profile -> simulate (amortize_year per year)
        -> summarize -> ProjectionResult

Also provides ``ProjectionEngine`` to run the same profile under an expected,
an optimistic and a pessimistic return assumption.

Typical usage
-------------
>>> from wealthcast import project
>>> result = project(
...     {"years": 20, "age1": 30, "income1": 60_000,
...      "initialInvestment": 20_000, "monthlyInvestment": 1_000,
...      "investmentReturn": 0.06, "monthlyExpenses": 2_500,
...      "expenseGrowth": 0.02},
...     mode="single",
... )
>>> result.summary.final_net_worth
>>> result.to_frame().tail()
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

import pandas as pd

from .config import AppSettings, ScenarioConfig
from .constants import DEFAULT_MILESTONE_TARGETS, MIN_CASE_RETURN
from .profile import HouseholdMode, Profile, normalize_profile
from .simulation import YearSnapshot, simulate
from .summary import MilestoneYear, ProjectionSummary, net_worth_milestones, summarize

__all__ = [
    "ProjectionResult",
    "run_projection",
    "project",
    "ProjectionEngine",
]


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionResult:
    """Trajectory plus derived milestones for one profile."""
    profile: Profile
    snapshots: Tuple[YearSnapshot, ...]
    summary: ProjectionSummary
    milestone_years: Tuple[Tuple[float, MilestoneYear], ...] = ()

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def milestones(self) -> Mapping[float, MilestoneYear]:
        """Read-only view: net-worth target -> first year reached."""
        return MappingProxyType(dict(self.milestone_years))

    @property
    def final_net_worth(self) -> float:
        return self.summary.final_net_worth

    def to_frame(self) -> pd.DataFrame:
        """One row per simulated year, indexed by ``year``."""
        columns = list(YearSnapshot.__dataclass_fields__)
        if not self.snapshots:
            return pd.DataFrame(columns=columns).set_index("year")
        return pd.DataFrame([s.to_dict() for s in self.snapshots], columns=columns).set_index("year")


def run_projection(
    profile: Profile,
    *,
    milestone_targets: Iterable[float] = DEFAULT_MILESTONE_TARGETS,
) -> ProjectionResult:
    """Simulate an already normalized profile and aggregate the result."""
    snapshots = tuple(simulate(profile))
    return ProjectionResult(
        profile=profile,
        snapshots=snapshots,
        summary=summarize(snapshots, profile),
        milestone_years=tuple(
            net_worth_milestones(snapshots, milestone_targets).items()
        ),
    )


def project(
    raw: Mapping[str, Any],
    mode: Union[HouseholdMode, str, bool, None] = None,
    *,
    settings: Optional[AppSettings] = None,
    milestone_targets: Iterable[float] = DEFAULT_MILESTONE_TARGETS,
) -> ProjectionResult:
    """
    Project a raw profile into a year-by-year trajectory.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Raw profile; optional fields may be absent.
    mode : HouseholdMode, str or bool, optional
        Household-mode flag (see ``normalize_profile``).
    settings : AppSettings, optional
        Supplies default debt and inflation rates. When None the module
        constants are used and no environment is read.
    milestone_targets : iterable of float
        Net-worth amounts reported in ``ProjectionResult.milestones``.

    Raises
    ------
    InvalidInputError
        When the raw profile cannot be normalized.
    """
    defaults: Dict[str, float] = {}
    if settings is not None:
        defaults = {
            "default_debt_rate": settings.default_debt_rate,
            "default_inflation_rate": settings.default_inflation_rate,
        }
    profile = normalize_profile(raw, mode, **defaults)
    return run_projection(profile, milestone_targets=milestone_targets)


# ---------------------------------------------------------------------------
# Three-case engine
# ---------------------------------------------------------------------------

class ProjectionEngine:
    """Runs one profile under expected, optimistic and pessimistic returns."""

    def __init__(self, profile: Profile, config: Optional[ScenarioConfig] = None):
        self.profile = profile
        self.cfg = config if config is not None else ScenarioConfig()

    def run(self) -> ProjectionResult:
        return self.run_case(self.profile.investment_return)

    def run_case(self, annual_return: float) -> ProjectionResult:
        return run_projection(
            self.profile.with_return(annual_return),
            milestone_targets=self.cfg.milestone_targets,
        )

    def run_three_cases(self) -> Dict[str, ProjectionResult]:
        """Run expected/optimistic/pessimistic cases around the profile's return."""
        r = self.profile.investment_return
        return {
            "expected": self.run_case(r),
            "optimistic": self.run_case(r + self.cfg.optimistic_delta),
            "pessimistic": self.run_case(
                max(r - self.cfg.pessimistic_delta, min(r, MIN_CASE_RETURN))
            ),
        }
