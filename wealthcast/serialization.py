"""
Serialization module for WealthCast profiles and projection results.

Purpose
-------
Provides JSON serialization and deserialization so profiles can be kept under
version control and projection results handed to other tools.

Profile files
-------------
Either a wrapped document::

    {
        "schema_version": "0.1.0",
        "mode": "dual",
        "profile": {"years": 20, "age1": 30, ...}
    }

or a bare mapping of profile fields (as posted by the web form). Field values
are passed through untouched; coercion happens in ``normalize_profile``.

Example
-------
>>> from pathlib import Path
>>> from wealthcast.serialization import load_profile, save_result
>>> from wealthcast import project
>>>
>>> raw, mode = load_profile(Path("profile.json"))
>>> result = project(raw, mode)
>>> save_result(result, Path("results/projection_result.json"))
"""

from __future__ import annotations
from typing import Dict, Any, Mapping, Optional, Tuple, TYPE_CHECKING
from pathlib import Path
import json
import logging
import math

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .profile import Profile
    from .projection import ProjectionResult

__all__ = [
    "SCHEMA_VERSION",
    "load_profile",
    "save_profile",
    "result_to_dict",
    "save_result",
    "save_results",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"


# ---------------------------------------------------------------------------
# Profile Serialization
# ---------------------------------------------------------------------------

def load_profile(path: Path) -> Tuple[Dict[str, Any], Optional[str]]:
    """
    Read a raw profile from a JSON file.

    Parameters
    ----------
    path : Path
        Profile file (wrapped document or bare mapping).

    Returns
    -------
    raw : dict
        Raw profile fields, not yet normalized.
    mode : str or None
        Household mode stated in the wrapper, if any.

    Raises
    ------
    ConfigurationError
        If the file is unreadable, not a JSON object, or declares an
        unsupported schema version.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Could not read profile {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Profile {path} must contain a JSON object, got {type(data).__name__}."
        )

    if "profile" not in data:
        logger.debug("Loaded bare profile mapping from %s", path)
        return data, None

    _check_schema_version(data, path)
    raw = data["profile"]
    if not isinstance(raw, dict):
        raise ConfigurationError(f"'profile' in {path} must be a JSON object.")
    mode = data.get("mode")
    return raw, mode


def save_profile(profile: Profile, path: Path) -> None:
    """Write a normalized profile as a wrapped profile document."""
    data = {
        "schema_version": SCHEMA_VERSION,
        "mode": profile.mode.value,
        "profile": profile.to_dict(),
    }
    _write_json(data, path)


# ---------------------------------------------------------------------------
# Result Serialization
# ---------------------------------------------------------------------------

def result_to_dict(result: ProjectionResult) -> Dict[str, Any]:
    """
    Convert a ProjectionResult to a JSON-compatible dictionary.

    Milestone sentinels are written as their string values ("never",
    "already_debt_free"). Non-finite amounts are written as
    null by the save functions.
    """
    summary = result.summary
    return {
        "schema_version": SCHEMA_VERSION,
        "profile": result.profile.to_dict(),
        "summary": {
            "final_net_worth": summary.final_net_worth,
            "net_worth_positive_year": _milestone_value(summary.net_worth_positive_year),
            "debt_free_year": _milestone_value(summary.debt_free_year),
            "realized_growth": summary.realized_growth,
        },
        "milestones": [
            {"target": target, "year": _milestone_value(year)}
            for target, year in result.milestones.items()
        ],
        "trajectory": [s.to_dict() for s in result.snapshots],
    }


def save_result(result: ProjectionResult, path: Path) -> None:
    """Save a single projection result to JSON."""
    _write_json(result_to_dict(result), path)


def save_results(results: Mapping[str, ProjectionResult], path: Path) -> None:
    """Save named results (e.g. the three cases) to one JSON document."""
    data = {
        "schema_version": SCHEMA_VERSION,
        "cases": {name: result_to_dict(res) for name, res in results.items()},
    }
    _write_json(data, path)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_schema_version(data: Mapping[str, Any], path: Path) -> None:
    version = data.get("schema_version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise ConfigurationError(
            f"Unsupported schema_version '{version}' in {path}. "
            f"Expected '{SCHEMA_VERSION}'."
        )


def _milestone_value(year: object) -> object:
    return getattr(year, "value", year)


def _finite_or_null(obj: Any) -> Any:
    """Replace inf/NaN (saturated projections) with None, i.e. JSON null."""
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, Mapping):
        return {key: _finite_or_null(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_finite_or_null(value) for value in obj]
    return obj


def _write_json(data: Mapping[str, Any], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(_finite_or_null(data), f, indent=2, allow_nan=False)
    logger.debug("Wrote %s", path)
