"""
Projection engine for compoundcalc.

Purpose
-------
Runs the forward compounding recurrence that turns a set of Parameters into
a Projection: the value of the account at the start of every compounding
period over the horizon.

Key Mathematical Framework
--------------------------
- Period rate: r = annual_rate_percent / 100 (applied once per period)
- Steps: n = floor(total_days / period_days)
- Recurrence: A_0 = principal,  A_{i+1} = A_i (1 + r) + c
- Emitted point i: (i, i * period_days, round2(A_i)) for i = 0..n

Rounding happens only when a point is emitted. The accumulator carries full
precision forward, so rounding error does not compound across periods.

Rate semantics
--------------
By default the stated annual rate is applied *as is* to every period, no
matter how many days a period spans (a daily cadence at 5% grows by 5% per
day). This literal behaviour is what existing users see. Setting
``rate_mode="annualized"`` opts into converting the annual rate to the
equivalent compounded per-period rate: (1 + r)^(period_days / 365) - 1.

Example
-------
>>> params = Parameters(principal=1000, annual_rate_percent=5,
...                     total_days=30, period_days=1)
>>> projection = project(params)
>>> len(projection)
31
>>> projection.final_amount
4321.94
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from .constants import RATE_MODES
from .exceptions import MissingInputError, ValidationError
from .utils import (
    annual_to_period,
    check_period_days,
    period_count,
    require_numbers,
    round2,
    to_number,
)

__all__ = [
    "Parameters",
    "ProjectionPoint",
    "Projection",
    "project",
]

logger = logging.getLogger(__name__)

_REQUIRED = ("principal", "annual_rate_percent", "total_days", "period_days")


def _is_number(value: object) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


# ---------------------------------------------------------------------------
# Parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Parameters:
    """
    Inputs of a single projection.

    Parameters
    ----------
    principal : float
        Capital at period 0. Must be >= 0.
    annual_rate_percent : float
        Rate in percent. Zero is allowed; negative values model decay.
    total_days : int
        Horizon length in days, >= 0.
    period_days : int
        Length of one compounding period in days, > 0. Conventionally one of
        1, 7, 30 or 365 (see constants.PERIOD_OPTIONS).
    contribution_per_period : float, default 0.0
        Amount added after each period's interest.
    target_amount : float, optional
        Threshold to detect in the projection. Must be > 0 when given.
    inflation_rate_percent : float, default 0.0
        Annual inflation used for the inflation-adjusted final amount.
        Must be > -100.
    rate_mode : {"per_period", "annualized"}, default "per_period"
        How annual_rate_percent maps onto one period (see module docstring).

    Raises
    ------
    MissingInputError
        If any of principal, annual_rate_percent, total_days or period_days
        is absent or not a finite number.
    InvalidPeriodError
        If period_days is not a positive whole number.
    ValidationError
        For any other out-of-range value.

    Examples
    --------
    >>> Parameters(principal=1000, annual_rate_percent=5, total_days=30, period_days=1)
    >>> Parameters.from_inputs(principal="1000", annual_rate_percent="5",
    ...                        total_days="30", period_days=1, target_amount="")
    """
    principal: float
    annual_rate_percent: float
    total_days: int
    period_days: int
    contribution_per_period: float = 0.0
    target_amount: Optional[float] = None
    inflation_rate_percent: float = 0.0
    rate_mode: str = "per_period"

    def __post_init__(self):
        """Validate inputs before anything can be computed from them."""
        missing = [name for name in _REQUIRED if not _is_number(getattr(self, name))]
        if missing:
            raise MissingInputError(missing)

        check_period_days(self.period_days)

        if self.principal < 0:
            raise ValidationError(f"principal must be >= 0, got {self.principal}")
        if self.total_days < 0 or float(self.total_days) != int(self.total_days):
            raise ValidationError(
                f"total_days must be a whole number >= 0, got {self.total_days}"
            )
        if not _is_number(self.contribution_per_period):
            raise ValidationError(
                f"contribution_per_period must be a finite number, "
                f"got {self.contribution_per_period!r}"
            )
        if self.target_amount is not None:
            if not _is_number(self.target_amount) or self.target_amount <= 0:
                raise ValidationError(
                    f"target_amount must be > 0 when given, got {self.target_amount!r}"
                )
        if not _is_number(self.inflation_rate_percent) or self.inflation_rate_percent <= -100:
            raise ValidationError(
                f"inflation_rate_percent must be > -100, got {self.inflation_rate_percent!r}"
            )
        if self.rate_mode not in RATE_MODES:
            raise ValidationError(
                f"rate_mode must be one of {RATE_MODES}, got {self.rate_mode!r}"
            )
        if self.rate_mode == "annualized":
            # Converting to a period rate needs a positive growth factor
            if 1.0 + self.annual_rate_percent / 100.0 <= 0:
                raise ValidationError(
                    f"annual_rate_percent must be > -100 when rate_mode is 'annualized', "
                    f"got {self.annual_rate_percent}"
                )
            try:
                self.period_rate
            except OverflowError as e:
                raise ValidationError(
                    f"annual_rate_percent={self.annual_rate_percent:g} overflows when "
                    f"converted to a {self.period_days}-day period rate"
                ) from e

    @classmethod
    def from_inputs(
        cls,
        principal: object = None,
        annual_rate_percent: object = None,
        total_days: object = None,
        period_days: object = None,
        contribution_per_period: object = 0.0,
        target_amount: object = None,
        inflation_rate_percent: object = 0.0,
        rate_mode: str = "per_period",
    ) -> "Parameters":
        """
        Build Parameters from raw form-style inputs.

        Numbers and numeric strings are accepted. For the required inputs,
        None, "" and non-numeric text raise MissingInputError listing every
        bad field. Optional inputs fall back to their defaults when blank;
        a blank or zero target means "no target".
        """
        required = require_numbers({
            "principal": principal,
            "annual_rate_percent": annual_rate_percent,
            "total_days": total_days,
            "period_days": period_days,
        })

        contribution = _optional_number("contribution_per_period", contribution_per_period, 0.0)
        inflation = _optional_number("inflation_rate_percent", inflation_rate_percent, 0.0)
        target = _optional_number("target_amount", target_amount, None)
        if target == 0:
            target = None

        period = check_period_days(required["period_days"])
        total = required["total_days"]
        if total == int(total):
            total = int(total)

        return cls(
            principal=required["principal"],
            annual_rate_percent=required["annual_rate_percent"],
            total_days=total,
            period_days=period,
            contribution_per_period=contribution,
            target_amount=target,
            inflation_rate_percent=inflation,
            rate_mode=rate_mode,
        )

    @property
    def steps(self) -> int:
        """Number of compounding periods: floor(total_days / period_days)."""
        return period_count(self.total_days, int(self.period_days))

    @property
    def period_rate(self) -> float:
        """Decimal growth rate applied once per period."""
        r = self.annual_rate_percent / 100.0
        if self.rate_mode == "annualized":
            return annual_to_period(r, int(self.period_days))
        return r


def _optional_number(name: str, value: object, default: Optional[float]) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    number = to_number(value)
    if number is None:
        raise ValidationError(f"{name} must be a finite number, got {value!r}")
    return number


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProjectionPoint:
    """Account value at the start of one period (amount rounded to 2 dp)."""
    period_index: int
    day_offset: int
    amount: float


@dataclass(frozen=True)
class Projection:
    """
    Immutable, chronologically ordered series of ProjectionPoint.

    Behaves like a read-only sequence (len, indexing, iteration). Point 0 is
    the principal before any accrual; ``final_amount`` is the last point's
    amount.
    """
    points: Tuple[ProjectionPoint, ...]
    period_days: int

    def __post_init__(self):
        if not self.points:
            raise ValueError("Projection requires at least one point")

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index):
        return self.points[index]

    def __iter__(self) -> Iterator[ProjectionPoint]:
        return iter(self.points)

    @property
    def steps(self) -> int:
        """Number of compounding periods (len - 1)."""
        return len(self.points) - 1

    @property
    def final_amount(self) -> float:
        return self.points[-1].amount

    @property
    def amounts(self) -> np.ndarray:
        """Rounded amounts as a read-only float array."""
        arr = np.fromiter((p.amount for p in self.points), dtype=float, count=len(self.points))
        arr.flags.writeable = False
        return arr

    @property
    def day_offsets(self) -> np.ndarray:
        """Day offsets as a read-only int array."""
        arr = np.fromiter((p.day_offset for p in self.points), dtype=int, count=len(self.points))
        arr.flags.writeable = False
        return arr

    def to_frame(self) -> pd.DataFrame:
        """Tabular view with columns period, day, amount (one row per point)."""
        return pd.DataFrame(
            {
                "period": [p.period_index for p in self.points],
                "day": [p.day_offset for p in self.points],
                "amount": [p.amount for p in self.points],
            }
        )


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

def project(params: Parameters) -> Projection:
    """
    Run the compounding recurrence for *params*.

    Parameters
    ----------
    params : Parameters
        Validated projection inputs.

    Returns
    -------
    Projection
        floor(total_days / period_days) + 1 points. A horizon shorter than
        one period yields a single point equal to the principal.

    Examples
    --------
    >>> p = Parameters(principal=1000, annual_rate_percent=5, total_days=30, period_days=1)
    >>> project(p)[4].amount
    1215.51
    """
    period_days = int(params.period_days)
    steps = params.steps
    r = params.period_rate
    contribution = float(params.contribution_per_period)

    logger.debug(
        "Projecting %d periods of %d day(s) at %.6f per period (mode=%s)",
        steps, period_days, r, params.rate_mode,
    )

    points = []
    amount = float(params.principal)
    for i in range(steps + 1):
        points.append(ProjectionPoint(period_index=i, day_offset=i * period_days, amount=round2(amount)))
        amount = amount * (1.0 + r) + contribution

    return Projection(points=tuple(points), period_days=period_days)
