"""
Summary statistics over a projection trajectory.

Reduces the ordered ``YearSnapshot`` sequence to the scalar milestones a
presentation layer shows next to the chart:

- final net worth
- first year the household's net worth is non-negative
- first year the debt is fully repaid
- realized average annual investment growth
- first year each net-worth target amount is reached

Years are the 1-indexed ``YearSnapshot.year`` values. When a milestone is not
reached within the horizon a ``Milestone`` sentinel is returned instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Sequence, Union

import numpy as np

from .profile import Profile
from .simulation import YearSnapshot
from .utils import realized_annual_growth

__all__ = [
    "Milestone",
    "MilestoneYear",
    "ProjectionSummary",
    "summarize",
    "net_worth_milestones",
]


class Milestone(str, Enum):
    """Sentinels for milestones without a year."""

    NEVER = "never"
    ALREADY_DEBT_FREE = "already_debt_free"


MilestoneYear = Union[int, Milestone]


@dataclass(frozen=True)
class ProjectionSummary:
    final_net_worth: float
    net_worth_positive_year: MilestoneYear
    debt_free_year: MilestoneYear
    realized_growth: float


def summarize(snapshots: Sequence[YearSnapshot], profile: Profile) -> ProjectionSummary:
    """
    Derive scalar milestones from a trajectory.

    Parameters
    ----------
    snapshots : Sequence[YearSnapshot]
        Output of ``simulate(profile)``; may be empty.
    profile : Profile
        Profile the trajectory was simulated from. Supplies the starting
        position and the nominal return used as growth fallback.

    Returns
    -------
    ProjectionSummary
        ``realized_growth`` is ``(W_end / W_0) ** (1 / n) - 1`` and falls back
        to ``profile.investment_return`` when ``W_0 == 0`` or ``n == 0``.
    """
    if snapshots:
        final_net_worth = snapshots[-1].net_worth
        final_investments = snapshots[-1].investment_balance
    else:
        final_net_worth = profile.initial_net_worth
        final_investments = profile.initial_investment

    net_worth = np.array([s.net_worth for s in snapshots], dtype=float)
    debt = np.array([s.debt_balance for s in snapshots], dtype=float)

    if profile.current_debt <= 0:
        debt_free_year: MilestoneYear = Milestone.ALREADY_DEBT_FREE
    else:
        debt_free_year = _first_year(snapshots, debt == 0.0)

    return ProjectionSummary(
        final_net_worth=float(final_net_worth),
        net_worth_positive_year=_first_year(snapshots, net_worth >= 0.0),
        debt_free_year=debt_free_year,
        realized_growth=realized_annual_growth(
            profile.initial_investment,
            final_investments,
            len(snapshots),
            fallback=profile.investment_return,
        ),
    )


def net_worth_milestones(
    snapshots: Sequence[YearSnapshot],
    targets: Iterable[float],
) -> Dict[float, MilestoneYear]:
    """Map each target amount to the first year net worth reaches it."""
    net_worth = np.array([s.net_worth for s in snapshots], dtype=float)
    return {
        float(target): _first_year(snapshots, net_worth >= target)
        for target in targets
    }


def _first_year(snapshots: Sequence[YearSnapshot], mask: np.ndarray) -> MilestoneYear:
    hits = np.flatnonzero(mask)
    if hits.size == 0:
        return Milestone.NEVER
    return snapshots[int(hits[0])].year
