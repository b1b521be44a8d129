"""
Summary statistics derived from a projection.

Purpose
-------
Turns a Projection (plus the Parameters that produced it) into a Summary:
final amount, interest earned, the day a target is first reached, an
estimated doubling time and the inflation-adjusted final amount. Also keeps
the simple max/min/average figures shown next to a projection.

Formulas
--------
- Interest earned:   final - (principal + steps * contribution)
- Doubling time:     round((72 / rate%) * 365) days, for rate > 0 and
                     principal > 0 (Rule of 72)
- Real final amount: final / (1 + inflation%/100) ** (total_days / 365),
                     or final unchanged when inflation or horizon is zero

The Rule of 72 is a heuristic. It is close to the exact solution of
(1 + r)^n = 2 only for rates around 6-10% and should not be read as precise
elsewhere.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .constants import DAYS_PER_YEAR, NOT_REACHED, RULE_OF_72
from .projection import Parameters, Projection
from .target import first_hit
from .utils import round2, round_half_up

__all__ = [
    "Summary",
    "summarize",
    "interest_earned",
    "doubling_days",
    "inflation_adjusted",
]


@dataclass(frozen=True)
class Summary:
    """
    Derived figures for one projection.

    Attributes
    ----------
    final_amount : float
        Amount of the last point.
    interest_earned : float
        Compounding gain net of capital put in (principal + contributions).
    target_hit_day : int or None
        Day offset at which the target is first reached; None when no target
        is set or it is never reached.
    doubling_days : int or None
        Rule-of-72 doubling estimate; None unless rate > 0 and principal > 0.
    inflation_adjusted_amount : float
        Final amount expressed in start-of-horizon money.
    total_contributed : float
        principal + steps * contribution.
    max_amount, min_amount, average_amount : float
        Extremes and mean of the emitted point amounts.
    """
    final_amount: float
    interest_earned: float
    target_hit_day: Optional[int]
    doubling_days: Optional[int]
    inflation_adjusted_amount: float
    total_contributed: float = 0.0
    max_amount: float = 0.0
    min_amount: float = 0.0
    average_amount: float = 0.0

    @property
    def target_status(self) -> Union[int, str]:
        """target_hit_day, or "not reached" when there is none."""
        return NOT_REACHED if self.target_hit_day is None else self.target_hit_day


def interest_earned(params: Parameters, projection: Projection) -> float:
    """final_amount - (principal + steps * contribution_per_period)."""
    contributed = params.principal + projection.steps * params.contribution_per_period
    return projection.final_amount - contributed


def doubling_days(annual_rate_percent: float, principal: float) -> Optional[int]:
    """
    Rule-of-72 doubling time in days.

    Examples
    --------
    >>> doubling_days(8, 1000)
    3285
    >>> doubling_days(0, 1000) is None
    True
    """
    if annual_rate_percent <= 0 or principal <= 0:
        return None
    years_to_double = RULE_OF_72 / annual_rate_percent
    return round_half_up(years_to_double * DAYS_PER_YEAR)


def inflation_adjusted(final_amount: float, inflation_rate_percent: float, total_days: float) -> float:
    """Discount *final_amount* by inflation over the horizon.

    Identity when either inflation_rate_percent or total_days is zero. A
    discount factor too large to represent leaves nothing in real terms (0.0).
    """
    if not inflation_rate_percent or not total_days:
        return final_amount
    try:
        factor = (1.0 + inflation_rate_percent / 100.0) ** (total_days / DAYS_PER_YEAR)
    except OverflowError:
        return 0.0
    if factor == 0.0:
        return math.copysign(math.inf, final_amount) if final_amount else 0.0
    return final_amount / factor


def summarize(params: Parameters, projection: Projection) -> Summary:
    """
    Build the Summary of *projection*.

    The target day comes from target.first_hit() against
    params.target_amount and is merged into the result.

    Parameters
    ----------
    params : Parameters
        Inputs the projection was produced from.
    projection : Projection
        Output of project(params).

    Returns
    -------
    Summary
    """
    amounts = projection.amounts
    final = projection.final_amount
    return Summary(
        final_amount=final,
        interest_earned=interest_earned(params, projection),
        target_hit_day=first_hit(projection, params.target_amount),
        doubling_days=doubling_days(params.annual_rate_percent, params.principal),
        inflation_adjusted_amount=inflation_adjusted(
            final, params.inflation_rate_percent, params.total_days
        ),
        total_contributed=params.principal + projection.steps * params.contribution_per_period,
        max_amount=float(np.max(amounts)),
        min_amount=float(np.min(amounts)),
        average_amount=round2(float(np.mean(amounts))),
    )
