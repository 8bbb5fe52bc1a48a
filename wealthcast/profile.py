"""
Profile module for WealthCast.

Purpose
-------
Entry point for the projection pipeline. Turns the loosely typed data a form
or a JSON file produces (optional fields missing, numbers as strings, NaN from
empty inputs) into a fully populated, immutable ``Profile`` that the simulator
can consume without further checks.

Key components
--------------
- HouseholdMode:
    Single or dual-earner household. In single mode the second earner's
    age and income are ignored.

- Profile:
    Frozen dataclass with every simulation assumption resolved. Its
    ``__post_init__`` only guards structural invariants; user-facing
    coercion and error reporting happen in ``normalize_profile``.

- normalize_profile:
    Pure function implementing the coercion policy:
      * required fields missing or non-numeric -> MISSING_REQUIRED_FIELD
      * required fields NaN / +-inf            -> NON_FINITE_NUMBER
      * horizon < 1                            -> NON_POSITIVE_HORIZON
      * any age < 0                            -> NEGATIVE_AGE
      * return or income growth <= -1          -> RATE_OUT_OF_RANGE
      * unknown household-mode flag            -> INVALID_HOUSEHOLD_MODE
      * optional fields absent, non-numeric or non-finite -> 0
        (debt rate and inflation -> configured defaults)
      * negative amounts and non-return rates clamped to 0

Field names
-----------
Canonical keys are snake_case. The camelCase keys sent by the web form
(``years``, ``age1``, ``monthlyInvestment``, ``currentDebt``, ...) are
accepted as aliases.

Example
-------
>>> from wealthcast.profile import normalize_profile, HouseholdMode
>>> profile = normalize_profile(
...     {
...         "years": 20, "age1": 30, "income1": 60_000,
...         "initialInvestment": 20_000, "monthlyInvestment": 1_000,
...         "investmentReturn": 0.06, "monthlyExpenses": 2_500,
...         "expenseGrowth": 0.02,
...     },
...     HouseholdMode.SINGLE,
... )
>>> profile.bonus_income
0.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np

from .constants import DEFAULT_DEBT_RATE, DEFAULT_INFLATION_RATE, MIN_RATE_EXCLUSIVE
from .exceptions import InputErrorKind, InvalidInputError
from .utils import check_non_negative, is_finite_number

__all__ = [
    "HouseholdMode",
    "Profile",
    "normalize_profile",
    "FIELD_ALIASES",
]

logger = logging.getLogger(__name__)


class HouseholdMode(str, Enum):
    SINGLE = "single"
    DUAL = "dual"

    @classmethod
    def coerce(cls, value: Union["HouseholdMode", str, bool]) -> "HouseholdMode":
        """Accept an enum member, its value, ``"couple"``, or a bool (True = dual)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls.DUAL if value else cls.SINGLE
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "couple":
                return cls.DUAL
            try:
                return cls(key)
            except ValueError:
                pass
        raise ValueError(
            f"household mode must be 'single' or 'dual' (or a bool), got {value!r}."
        )


# canonical name -> accepted aliases (first hit wins)
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "horizon": ("horizon", "years", "horizon_years"),
    "age1": ("age1",),
    "age2": ("age2",),
    "income1": ("income1",),
    "income2": ("income2",),
    "bonus_income": ("bonus_income", "bonusIncome"),
    "other_income": ("other_income", "otherIncome"),
    "initial_investment": ("initial_investment", "initialInvestment"),
    "monthly_investment": ("monthly_investment", "monthlyInvestment"),
    "investment_return": ("investment_return", "investmentReturn"),
    "income_growth": ("income_growth", "incomeGrowth"),
    "monthly_expenses": ("monthly_expenses", "monthlyExpenses"),
    "expense_growth": ("expense_growth", "expenseGrowth"),
    "current_debt": ("current_debt", "currentDebt"),
    "monthly_debt_payment": ("monthly_debt_payment", "monthlyDebtPayment"),
    "debt_rate": ("debt_rate", "debtRate"),
    "inflation_rate": ("inflation_rate", "inflationRate"),
}

_MODE_KEYS: Tuple[str, ...] = ("mode", "household_mode", "is_couple", "isCouple")


@dataclass(frozen=True)
class Profile:
    """
    Normalized set of financial assumptions driving one simulation run.

    Parameters
    ----------
    horizon : int
        Number of simulated years. The normalizer guarantees >= 1; the
        simulator itself tolerates 0.
    mode : HouseholdMode
        Single or dual-earner household.
    age1 : int
        Primary earner's age at the start of the projection.
    income1 : float
        Primary earner's gross annual income.
    initial_investment : float
        Investable assets at the start of year 1.
    monthly_investment : float
        Contribution added at the end of every month.
    investment_return : float
        Nominal annual return, compounded monthly at ``rate / 12``. May be
        negative but must be > -1.
    monthly_expenses : float
        Living expenses per month in year 1.
    expense_growth : float
        Annual growth of living expenses (>= 0).
    age2, income2 : optional
        Second earner; ``None`` / 0.0 in single mode.
    bonus_income, other_income : float
        Annual amounts added to income every year without growth.
    income_growth : float
        Annual growth of salaried income (may be negative, > -1).
    current_debt : float
        Debt principal at the start of year 1.
    monthly_debt_payment : float
        Scheduled monthly payment towards the debt.
    debt_rate : float
        Nominal annual interest rate on the debt.
    inflation_rate : float
        Annual inflation used for the real (today's money) net worth.
    """

    horizon: int
    mode: HouseholdMode
    age1: int
    income1: float
    initial_investment: float
    monthly_investment: float
    investment_return: float
    monthly_expenses: float
    expense_growth: float
    age2: Optional[int] = None
    income2: float = 0.0
    bonus_income: float = 0.0
    other_income: float = 0.0
    income_growth: float = 0.0
    current_debt: float = 0.0
    monthly_debt_payment: float = 0.0
    debt_rate: float = DEFAULT_DEBT_RATE
    inflation_rate: float = DEFAULT_INFLATION_RATE

    def __post_init__(self) -> None:
        check_non_negative("horizon", self.horizon)
        for name in (
            "income1", "income2", "bonus_income", "other_income",
            "initial_investment", "monthly_investment", "monthly_expenses",
            "expense_growth", "current_debt", "monthly_debt_payment",
            "debt_rate", "inflation_rate",
        ):
            check_non_negative(name, getattr(self, name))
        for name in ("investment_return", "income_growth"):
            if getattr(self, name) <= MIN_RATE_EXCLUSIVE:
                raise ValueError(f"{name} must be > -1 (got {getattr(self, name)}).")

    @property
    def is_dual(self) -> bool:
        return self.mode is HouseholdMode.DUAL

    @property
    def salary_income(self) -> float:
        """Combined income subject to ``income_growth``."""
        return self.income1 + self.income2

    @property
    def initial_net_worth(self) -> float:
        return self.initial_investment - self.current_debt

    def with_return(self, investment_return: float) -> "Profile":
        """Copy of this profile with a different expected return."""
        return replace(self, investment_return=investment_return)

    def to_dict(self) -> Dict[str, Any]:
        """Canonical snake_case mapping accepted back by ``normalize_profile``."""
        data: Dict[str, Any] = {
            name: getattr(self, name) for name in FIELD_ALIASES
        }
        if not self.is_dual:
            data.pop("age2")
            data.pop("income2")
        data["mode"] = self.mode.value
        return data


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

def normalize_profile(
    raw: Mapping[str, Any],
    mode: Union[HouseholdMode, str, bool, None] = None,
    *,
    default_debt_rate: float = DEFAULT_DEBT_RATE,
    default_inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> Profile:
    """
    Coerce a possibly partial raw profile into a validated ``Profile``.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Raw field values keyed by canonical names or their aliases.
    mode : HouseholdMode, str or bool, optional
        Household-mode flag. When None, read from ``raw`` (``mode`` or
        ``isCouple``), defaulting to single.
    default_debt_rate, default_inflation_rate : float
        Used when the profile omits the corresponding rate.

    Returns
    -------
    Profile

    Raises
    ------
    InvalidInputError
        See module docstring for the error kinds.
    """
    household = _resolve_mode(raw, mode)

    horizon = _required(raw, "horizon")
    if horizon < 1:
        raise InvalidInputError(
            InputErrorKind.NON_POSITIVE_HORIZON,
            f"horizon must be at least 1 year, got {horizon:g}.",
            field="horizon",
        )

    age1 = _age(raw, "age1")
    income1 = _amount("income1", _required(raw, "income1"))
    if household is HouseholdMode.DUAL:
        age2: Optional[int] = _age(raw, "age2")
        income2 = _amount("income2", _required(raw, "income2"))
    else:
        age2, income2 = None, 0.0

    investment_return = _rate("investment_return", _required(raw, "investment_return"))
    income_growth = _rate("income_growth", _optional(raw, "income_growth"))

    profile = Profile(
        horizon=int(horizon),
        mode=household,
        age1=age1,
        income1=income1,
        initial_investment=_amount(
            "initial_investment", _required(raw, "initial_investment")
        ),
        monthly_investment=_amount(
            "monthly_investment", _required(raw, "monthly_investment")
        ),
        investment_return=investment_return,
        monthly_expenses=_amount("monthly_expenses", _required(raw, "monthly_expenses")),
        expense_growth=_amount("expense_growth", _required(raw, "expense_growth")),
        age2=age2,
        income2=income2,
        bonus_income=_amount("bonus_income", _optional(raw, "bonus_income")),
        other_income=_amount("other_income", _optional(raw, "other_income")),
        income_growth=income_growth,
        current_debt=_amount("current_debt", _optional(raw, "current_debt")),
        monthly_debt_payment=_amount(
            "monthly_debt_payment", _optional(raw, "monthly_debt_payment")
        ),
        debt_rate=_amount(
            "debt_rate", _optional(raw, "debt_rate", default=default_debt_rate)
        ),
        inflation_rate=_amount(
            "inflation_rate",
            _optional(raw, "inflation_rate", default=default_inflation_rate),
        ),
    )
    logger.debug("Normalized profile: %s", profile)
    return profile


def _resolve_mode(
    raw: Mapping[str, Any],
    mode: Union[HouseholdMode, str, bool, None],
) -> HouseholdMode:
    if mode is None:
        mode = next(
            (raw[key] for key in _MODE_KEYS if raw.get(key) is not None),
            HouseholdMode.SINGLE,
        )
    try:
        return HouseholdMode.coerce(mode)
    except ValueError as e:
        raise InvalidInputError(
            InputErrorKind.INVALID_HOUSEHOLD_MODE, str(e), field="mode"
        ) from e


def _lookup(raw: Mapping[str, Any], name: str) -> Any:
    for alias in FIELD_ALIASES[name]:
        if alias in raw:
            return raw[alias]
    return None


def _to_number(value: Any) -> Optional[float]:
    """Numeric coercion; None when *value* is not a number at all."""
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    if isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    return None


def _required(raw: Mapping[str, Any], name: str) -> float:
    number = _to_number(_lookup(raw, name))
    if number is None:
        raise InvalidInputError(
            InputErrorKind.MISSING_REQUIRED_FIELD,
            f"{name} is required and must be numeric.",
            field=name,
        )
    if not is_finite_number(number):
        raise InvalidInputError(
            InputErrorKind.NON_FINITE_NUMBER,
            f"{name} must be a finite number, got {number}.",
            field=name,
        )
    return number


def _optional(raw: Mapping[str, Any], name: str, *, default: float = 0.0) -> float:
    value = _lookup(raw, name)
    number = _to_number(value)
    if number is None or not is_finite_number(number):
        if value is not None:
            logger.debug("Ignoring unusable %s=%r, using %s", name, value, default)
        return float(default)
    return number


def _age(raw: Mapping[str, Any], name: str) -> int:
    age = _required(raw, name)
    if age < 0:
        raise InvalidInputError(
            InputErrorKind.NEGATIVE_AGE,
            f"{name} must be >= 0, got {age:g}.",
            field=name,
        )
    return int(age)


def _amount(name: str, value: float) -> float:
    if value < 0:
        logger.info("Clamping negative %s=%s to 0", name, value)
        return 0.0
    return float(value)


def _rate(name: str, value: float) -> float:
    if value <= MIN_RATE_EXCLUSIVE:
        raise InvalidInputError(
            InputErrorKind.RATE_OUT_OF_RANGE,
            f"{name} must be greater than -1 (-100%/year), got {value:g}.",
            field=name,
        )
    return float(value)
