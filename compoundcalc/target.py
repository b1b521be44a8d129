"""
Target detection for projections.

Scans a Projection in chronological order for the first point whose amount
reaches a target. Reaching the target exactly counts as a hit. Never reaching
it is an ordinary outcome, reported as None rather than raised.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from .projection import Projection

__all__ = [
    "first_hit",
    "first_hit_period",
    "target_reached",
]


def first_hit_period(projection: Projection, target_amount: Optional[float]) -> Optional[int]:
    """Period index of the first point with amount >= target, or None."""
    if target_amount is None:
        return None
    hits = np.flatnonzero(projection.amounts >= float(target_amount))
    if hits.size == 0:
        return None
    return int(hits[0])


def first_hit(projection: Projection, target_amount: Optional[float]) -> Optional[int]:
    """
    Day offset at which the projection first reaches *target_amount*.

    Parameters
    ----------
    projection : Projection
        Series to scan. Not modified.
    target_amount : float, optional
        Threshold. None means no target is set.

    Returns
    -------
    int or None
        day_offset of the earliest point with amount >= target_amount;
        None if no target is set or no point reaches it.

    Examples
    --------
    >>> p = project(Parameters(principal=1000, annual_rate_percent=5,
    ...                        total_days=30, period_days=1))
    >>> first_hit(p, 1200)
    4
    >>> first_hit(p, 1_000_000) is None
    True
    """
    period = first_hit_period(projection, target_amount)
    if period is None:
        return None
    return projection[period].day_offset


def target_reached(projection: Projection, target_amount: Optional[float]) -> bool:
    """True if any point of the projection reaches *target_amount*."""
    return first_hit_period(projection, target_amount) is not None
