"""
Custom exceptions for WealthCast.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all WealthCast modules. All exceptions inherit from WealthCastError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
WealthCastError (base)
├── ConfigurationError - Invalid configuration files or settings
└── ValidationError - Data validation failures
    └── InvalidInputError - Raw profile rejected by the normalizer

Usage
-----
>>> from wealthcast.exceptions import InvalidInputError, InputErrorKind
>>>
>>> try:
...     result = project({"years": 0, ...})
... except InvalidInputError as e:
...     if e.kind is InputErrorKind.NON_POSITIVE_HORIZON:
...         print(f"Bad horizon: {e}")
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = [
    "WealthCastError",
    "ConfigurationError",
    "ValidationError",
    "InputErrorKind",
    "InvalidInputError",
]


class WealthCastError(Exception):
    """
    Base exception for all WealthCast errors.

    Examples
    --------
    >>> try:
    ...     result = project(raw)
    ... except WealthCastError as e:
    ...     logger.error(f"Projection failed: {e}")
    """
    pass


class ConfigurationError(WealthCastError):
    """
    Invalid configuration or parameters.

    Raised when a profile or result file cannot be read, such as:
    - Malformed JSON
    - Unsupported schema_version
    - Missing top-level sections

    Examples
    --------
    >>> raise ConfigurationError(
    ...     "Unsupported schema_version '9.0.0' in profile.json. "
    ...     "Expected '0.1.0'."
    ... )
    """
    pass


class ValidationError(WealthCastError):
    """
    Data validation failures.

    Raised when input data fails validation checks.
    """
    pass


class InputErrorKind(str, Enum):
    """Reason a raw profile was rejected."""

    NON_POSITIVE_HORIZON = "NonPositiveHorizon"
    NEGATIVE_AGE = "NegativeAge"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    NON_FINITE_NUMBER = "NonFiniteNumber"
    RATE_OUT_OF_RANGE = "RateOutOfRange"
    INVALID_HOUSEHOLD_MODE = "InvalidHouseholdMode"


class InvalidInputError(ValidationError):
    """
    Raw profile could not be normalized into a simulation profile.

    Raised synchronously by ``normalize_profile`` (never by the simulator or
    the aggregator). The message is meant to be surfaced to the user as a
    validation message.

    Attributes
    ----------
    kind : InputErrorKind
        Machine-readable reason.
    field : str, optional
        Canonical (snake_case) name of the offending field.

    Examples
    --------
    >>> raise InvalidInputError(
    ...     InputErrorKind.NEGATIVE_AGE,
    ...     "age1 must be >= 0, got -3.",
    ...     field="age1",
    ... )
    """

    def __init__(
        self,
        kind: InputErrorKind,
        message: str,
        *,
        field: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.field = field

