"""
Configuration management module for WealthCast.

Purpose
-------
Centralized configuration using Pydantic models for type-safe parameter management,
validation, and serialization. Supports environment variables, JSON configs,
and programmatic defaults.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: Easy conversion to/from JSON for config files
- Environment-aware: Supports .env files for deployment defaults
- Defaults: Sensible defaults for all parameters

Profiles themselves are deliberately *not* a Pydantic model: raw profiles are
partial, loosely typed form data and go through ``profile.normalize_profile``,
which implements the coercion rules and error kinds of the engine.

Example
-------
>>> from wealthcast.config import ScenarioConfig, AppSettings
>>> cases = ScenarioConfig(optimistic_delta=0.02, pessimistic_delta=0.04)
>>> cases.model_dump()["optimistic_delta"]
0.02
>>> settings = AppSettings()
>>> settings.default_debt_rate
0.0
"""

from __future__ import annotations
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_DEBT_RATE,
    DEFAULT_INFLATION_RATE,
    DEFAULT_MILESTONE_TARGETS,
    DEFAULT_OPTIMISTIC_DELTA,
    DEFAULT_PESSIMISTIC_DELTA,
)

__all__ = [
    "ScenarioConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Scenario Configuration
# ---------------------------------------------------------------------------

class ScenarioConfig(BaseModel):
    """
    Configuration for the three-case (expected/optimistic/pessimistic) run
    and the net-worth milestone table.

    Attributes
    ----------
    optimistic_delta : float
        Added to the profile's expected return for the optimistic case.
    pessimistic_delta : float
        Subtracted from the expected return for the pessimistic case.
    milestone_targets : list of float
        Net-worth amounts whose first-reached year is reported.

    Examples
    --------
    >>> config = ScenarioConfig(optimistic_delta=0.03, pessimistic_delta=0.03)
    >>> config.milestone_targets[:2]
    [100000.0, 250000.0]
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    optimistic_delta: float = Field(
        default=DEFAULT_OPTIMISTIC_DELTA,
        ge=0,
        le=1.0,
        description="Return spread above the expected case"
    )
    pessimistic_delta: float = Field(
        default=DEFAULT_PESSIMISTIC_DELTA,
        ge=0,
        le=1.0,
        description="Return spread below the expected case"
    )
    milestone_targets: List[float] = Field(
        default_factory=lambda: list(DEFAULT_MILESTONE_TARGETS),
        description="Net-worth amounts reported as milestones"
    )

    @field_validator("milestone_targets")
    @classmethod
    def validate_targets(cls, v):
        """Ensure targets are positive; returned sorted ascending."""
        if any(t <= 0 for t in v):
            raise ValueError("milestone_targets must all be positive")
        return sorted(v)


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    should be prefixed with WEALTHCAST_ (e.g., WEALTHCAST_DEFAULT_DEBT_RATE=0.05).

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging in the CLI)
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    default_debt_rate : float
        Annual debt rate applied when a profile omits ``debt_rate``
    default_inflation_rate : float
        Annual inflation applied when a profile omits ``inflation_rate``
    currency_symbol : str
        Symbol used by the CLI and plots when printing amounts

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.log_level
    'INFO'

    # With .env file:
    # WEALTHCAST_DEFAULT_DEBT_RATE=0.06
    >>> settings = AppSettings(_env_file=".env")
    >>> settings.default_debt_rate
    0.06
    """

    model_config = SettingsConfigDict(
        env_prefix="WEALTHCAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    default_debt_rate: float = Field(
        default=DEFAULT_DEBT_RATE,
        ge=0,
        le=1.0,
        description="Annual debt interest rate when the profile omits one"
    )
    default_inflation_rate: float = Field(
        default=DEFAULT_INFLATION_RATE,
        ge=0,
        le=1.0,
        description="Annual inflation when the profile omits one"
    )
    currency_symbol: str = Field(
        default="$",
        min_length=1,
        max_length=4,
        description="Currency symbol for display"
    )
