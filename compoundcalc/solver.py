"""
Reverse solver for compoundcalc.

Purpose
-------
Inverts contribution-free compounding growth to answer "what rate do I
need?" or "what principal do I need?" for a target amount.

Mathematical Framework
----------------------
With n = floor(total_days / period_days) periods and no contributions:

    target = principal * (1 + r)^n

so that

    r         = (target / principal)^(1/n) - 1        (solve_rate)
    principal = target / (1 + r)^n                    (solve_principal)

Limitations
-----------
Periodic contributions are not part of the inverse. A caller that has
contributions in play gets the contribution-free answer; reverse_solve()
warns when it is handed a non-zero contribution so the approximation is not
silent.

Failure modes
-------------
Raises DegenerateSolveError when n = 0 (horizon shorter than one period),
when the base of the exponentiation is not positive, or when the growth
factor overflows a float. Callers must handle it before trusting a
returned figure.

Example
-------
>>> rate = solve_rate(principal=1000, target_amount=2000, total_days=365, period_days=365)
>>> round(rate, 6)
100.0
>>> solve_principal(rate, target_amount=2000, total_days=365, period_days=365)
1000.0
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Literal, Optional

from .constants import RATE_MODES
from .exceptions import DegenerateSolveError, ValidationError
from .utils import (
    annual_to_period,
    check_period_days,
    period_count,
    period_to_annual,
    require_numbers,
    to_number,
)

__all__ = [
    "ReverseSolution",
    "solve_rate",
    "solve_principal",
    "reverse_solve",
]

logger = logging.getLogger(__name__)

RateMode = Literal["per_period", "annualized"]


@dataclass(frozen=True)
class ReverseSolution:
    """Result of reverse_solve(): which quantity was solved and its value."""
    solved_for: Literal["rate", "principal"]
    value: float


def _check_rate_mode(rate_mode: str) -> None:
    if rate_mode not in RATE_MODES:
        raise ValidationError(f"rate_mode must be one of {RATE_MODES}, got {rate_mode!r}")


def _periods(total_days: float, period_days: float) -> tuple[int, int]:
    period = check_period_days(period_days)
    n = period_count(total_days, period)
    if n <= 0:
        raise DegenerateSolveError(
            f"horizon contains no complete period "
            f"(total_days={total_days:g} < period_days={period})"
        )
    return period, n


def solve_rate(
    principal: float,
    target_amount: float,
    total_days: float,
    period_days: float,
    rate_mode: RateMode = "per_period",
) -> float:
    """
    Rate (percent) that grows *principal* into *target_amount* over the horizon.

    Parameters
    ----------
    principal : float
        Starting capital, must be > 0.
    target_amount : float
        Amount to reach, must be > 0.
    total_days : float
        Horizon length in days.
    period_days : float
        Compounding period length in days, > 0.
    rate_mode : {"per_period", "annualized"}, default "per_period"
        "per_period" returns the rate applied once per period (the engine's
        default semantics); "annualized" returns the equivalent annual rate.

    Returns
    -------
    float
        Required rate in percent.

    Raises
    ------
    MissingInputError, InvalidPeriodError
        On absent/non-numeric inputs or a non-positive period.
    DegenerateSolveError
        If n = 0, principal <= 0 or target_amount <= 0, or if the
        annualized rate overflows.
    """
    _check_rate_mode(rate_mode)
    values = require_numbers({
        "principal": principal,
        "target_amount": target_amount,
        "total_days": total_days,
        "period_days": period_days,
    })
    period, n = _periods(values["total_days"], values["period_days"])
    if values["principal"] <= 0:
        raise DegenerateSolveError(f"principal must be > 0, got {values['principal']:g}")
    if values["target_amount"] <= 0:
        raise DegenerateSolveError(f"target_amount must be > 0, got {values['target_amount']:g}")

    r = (values["target_amount"] / values["principal"]) ** (1.0 / n) - 1.0
    if rate_mode == "annualized":
        try:
            r = period_to_annual(r, period)
        except OverflowError as e:
            raise DegenerateSolveError("annualized rate overflows") from e

    logger.debug("solve_rate: n=%d periods -> %.6f%% (%s)", n, r * 100.0, rate_mode)
    return r * 100.0


def solve_principal(
    annual_rate_percent: float,
    target_amount: float,
    total_days: float,
    period_days: float,
    rate_mode: RateMode = "per_period",
) -> float:
    """
    Principal needed to reach *target_amount* at *annual_rate_percent*.

    Parameters
    ----------
    annual_rate_percent : float
        Rate in percent, interpreted according to *rate_mode*.
    target_amount : float
        Amount to reach.
    total_days, period_days : float
        Horizon and compounding period lengths in days.
    rate_mode : {"per_period", "annualized"}, default "per_period"

    Returns
    -------
    float
        Required principal.

    Raises
    ------
    MissingInputError, InvalidPeriodError
        On absent/non-numeric inputs or a non-positive period.
    DegenerateSolveError
        If n = 0, 1 + rate/100 <= 0 or (1 + r)^n overflows.
    """
    _check_rate_mode(rate_mode)
    values = require_numbers({
        "annual_rate_percent": annual_rate_percent,
        "target_amount": target_amount,
        "total_days": total_days,
        "period_days": period_days,
    })
    period, n = _periods(values["total_days"], values["period_days"])

    r = values["annual_rate_percent"] / 100.0
    if 1.0 + r <= 0:
        raise DegenerateSolveError(
            f"growth factor 1 + rate/100 must be > 0, got {1.0 + r:g}"
        )
    if rate_mode == "annualized":
        r = annual_to_period(r, period)

    try:
        growth = (1.0 + r) ** n
    except OverflowError as e:
        raise DegenerateSolveError("growth factor (1 + r)^n overflows") from e
    principal = values["target_amount"] / growth
    logger.debug("solve_principal: n=%d periods -> %.2f (%s)", n, principal, rate_mode)
    return principal


def reverse_solve(
    target_amount: float,
    total_days: float,
    period_days: float,
    *,
    principal: Optional[float] = None,
    annual_rate_percent: Optional[float] = None,
    contribution_per_period: float = 0.0,
    rate_mode: RateMode = "per_period",
) -> ReverseSolution:
    """
    Solve for whichever of principal / rate is unknown.

    Exactly one of *principal* and *annual_rate_percent* must be given; the
    other is solved. The known value is not cross-checked.

    A non-zero *contribution_per_period* is ignored (with a UserWarning):
    the answer is the contribution-free approximation.

    Examples
    --------
    >>> reverse_solve(2000, 365, 365, principal=1000)
    ReverseSolution(solved_for='rate', value=100.0)
    """
    has_principal = to_number(principal) is not None
    has_rate = to_number(annual_rate_percent) is not None
    if has_principal == has_rate:
        raise ValidationError(
            "reverse_solve needs exactly one of principal or annual_rate_percent"
        )

    contribution = to_number(contribution_per_period)
    if contribution:
        warnings.warn(
            f"contribution_per_period={contribution:g} is ignored by the reverse "
            f"solver; the result assumes no periodic contributions.",
            UserWarning,
            stacklevel=2,
        )

    if has_principal:
        value = solve_rate(principal, target_amount, total_days, period_days, rate_mode)
        return ReverseSolution(solved_for="rate", value=value)
    value = solve_principal(annual_rate_percent, target_amount, total_days, period_days, rate_mode)
    return ReverseSolution(solved_for="principal", value=value)
