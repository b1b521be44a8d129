"""
Type definitions for compoundcalc.

Purpose
-------
TypedDict definitions for the plain dictionaries that cross the package
boundary: the flat persisted state record and the summary dictionary handed
to collaborators (tables, exports, persistence).

Type Definitions
----------------
ParametersDict
    Projection inputs as stored in files: {"principal", "annual_rate_percent", ...}

SummaryDict
    Summary figures: {"final_amount", "interest_earned", "target_hit_day", ...}

StateRecordDict
    Flat key-value record of the last projection: ParametersDict keys,
    SummaryDict keys, plus "schema_version" and "currency".
"""

from typing import Optional
from typing_extensions import TypedDict, NotRequired

__all__ = [
    "ParametersDict",
    "SummaryDict",
    "StateRecordDict",
]


class ParametersDict(TypedDict):
    """
    Projection inputs in file form.

    Examples
    --------
    >>> params: ParametersDict = {
    ...     "principal": 1000.0, "annual_rate_percent": 5.0,
    ...     "total_days": 30, "period_days": 1,
    ...     "contribution_per_period": 0.0, "target_amount": None,
    ...     "inflation_rate_percent": 0.0, "rate_mode": "per_period",
    ... }
    """

    principal: float
    annual_rate_percent: float
    total_days: int
    period_days: int
    contribution_per_period: float
    target_amount: Optional[float]
    inflation_rate_percent: float
    rate_mode: str


class SummaryDict(TypedDict):
    """Summary figures; target_hit_day/doubling_days are None when undefined."""

    final_amount: float
    interest_earned: float
    target_hit_day: Optional[int]
    doubling_days: Optional[int]
    inflation_adjusted_amount: float
    total_contributed: float
    max_amount: float
    min_amount: float
    average_amount: float


class StateRecordDict(ParametersDict, SummaryDict):
    """
    Flat persisted record of the last projection.

    Attributes
    ----------
    schema_version : str
        Record layout version (serialization.SCHEMA_VERSION).
    currency : str
        Display label chosen when the record was saved.
    """

    schema_version: str
    currency: NotRequired[str]
