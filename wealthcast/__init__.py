"""
WealthCast — Multi-year Net Worth Projection

A deterministic engine that turns a household's financial profile into a
year-by-year trajectory of income, expenses, investments, debt and net worth.

Modules
-------
- profile      : Raw profile normalization (InputNormalizer)
- simulation   : Year-by-year loop (ProjectionSimulator)
- debt         : Monthly amortization per year (DebtAmortizer)
- summary      : Milestones and realized growth (SummaryAggregator)
- projection   : Entry point and three-case engine
- utils        : Shared utilities (validation, rates, reporting)

"""

from .exceptions import InvalidInputError, InputErrorKind
from .profile import HouseholdMode, Profile, normalize_profile
from .projection import ProjectionEngine, ProjectionResult, project, run_projection
from .summary import Milestone
from . import utils
