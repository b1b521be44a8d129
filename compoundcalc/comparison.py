"""
Scenario comparison for compoundcalc.

Purpose
-------
Runs the projection pipeline (project -> first_hit -> summarize) over a set
of independently parameterised scenarios so their outcomes can be compared
side by side.

Design notes
------------
- Scenarios carry principal, rate and horizon only. They never carry their
  own compounding cadence: every scenario is projected with the single
  ``period_days`` passed to compare(), and with no periodic contribution.
- Input order is preserved. No ranking is computed; deciding which scenario
  is "best" is left to the caller (comparison_table() makes that easy).

Example
-------
>>> scenarios = [
...     Scenario("Cautious", principal=1000, annual_rate_percent=2, total_days=30),
...     Scenario("Bold", principal=1000, annual_rate_percent=5, total_days=30),
... ]
>>> results = compare(scenarios, period_days=1, target_amount=1200)
>>> [summary.target_hit_day for _, summary in results]
[10, 4]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .exceptions import ValidationError
from .projection import Parameters, Projection, project
from .summary import Summary, summarize
from .utils import check_period_days

__all__ = [
    "Scenario",
    "compare",
    "project_scenarios",
    "scenario_parameters",
    "comparison_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """
    A named what-if variant of the projection inputs.

    Parameters
    ----------
    name : str
        Display label.
    principal : float
        Starting capital.
    annual_rate_percent : float
        Rate in percent.
    total_days : int
        Horizon length in days.
    color : str, optional
        Display color for charts. Not used by the computation.
    """
    name: str
    principal: float
    annual_rate_percent: float
    total_days: int
    color: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValidationError("Scenario name must be non-empty")


def scenario_parameters(
    scenario: Scenario,
    period_days: int,
    target_amount: Optional[float] = None,
    inflation_rate_percent: float = 0.0,
    rate_mode: str = "per_period",
) -> Parameters:
    """Parameters for *scenario* under the shared period length (no contribution)."""
    return Parameters(
        principal=scenario.principal,
        annual_rate_percent=scenario.annual_rate_percent,
        total_days=scenario.total_days,
        period_days=period_days,
        contribution_per_period=0.0,
        target_amount=target_amount,
        inflation_rate_percent=inflation_rate_percent,
        rate_mode=rate_mode,
    )


def compare(
    scenarios: Sequence[Scenario],
    period_days: int,
    target_amount: Optional[float] = None,
    *,
    inflation_rate_percent: float = 0.0,
    rate_mode: str = "per_period",
) -> List[Tuple[Scenario, Summary]]:
    """
    Summarize every scenario under the shared *period_days*.

    Parameters
    ----------
    scenarios : Sequence[Scenario]
        Scenarios to run, in the order results should be returned.
    period_days : int
        Compounding period length shared by all scenarios.
    target_amount : float, optional
        Target detected in every scenario.
    inflation_rate_percent : float, default 0.0
        Inflation applied to every scenario's real final amount.
    rate_mode : {"per_period", "annualized"}, default "per_period"

    Returns
    -------
    list of (Scenario, Summary)
        One pair per scenario, same order as *scenarios*.

    Raises
    ------
    InvalidPeriodError
        If period_days is not a positive whole number (checked once, before
        any scenario runs).
    MissingInputError, ValidationError
        If a scenario's own inputs are unusable.
    """
    check_period_days(period_days)

    results: List[Tuple[Scenario, Summary]] = []
    for scenario in scenarios:
        params = scenario_parameters(
            scenario, period_days, target_amount, inflation_rate_percent, rate_mode
        )
        projection = project(params)
        results.append((scenario, summarize(params, projection)))

    logger.debug("Compared %d scenario(s) at period_days=%s", len(results), period_days)
    return results


def project_scenarios(
    scenarios: Sequence[Scenario],
    period_days: int,
    rate_mode: str = "per_period",
) -> List[Tuple[Scenario, Projection]]:
    """Projections for every scenario, for callers that render the series."""
    check_period_days(period_days)
    return [
        (scenario, project(scenario_parameters(scenario, period_days, rate_mode=rate_mode)))
        for scenario in scenarios
    ]


def comparison_table(results: Sequence[Tuple[Scenario, Summary]]) -> pd.DataFrame:
    """
    Build a comparison table from compare() output.

    Rows keep the input order and are indexed by scenario name. Columns:
    principal, rate_percent, total_days, final_amount, interest_earned,
    target_hit_day, doubling_days, inflation_adjusted_amount.
    """
    columns = [
        "principal",
        "rate_percent",
        "total_days",
        "final_amount",
        "interest_earned",
        "target_hit_day",
        "doubling_days",
        "inflation_adjusted_amount",
    ]
    rows = [
        {
            "scenario": scenario.name,
            "principal": scenario.principal,
            "rate_percent": scenario.annual_rate_percent,
            "total_days": scenario.total_days,
            "final_amount": summary.final_amount,
            "interest_earned": summary.interest_earned,
            "target_hit_day": summary.target_hit_day,
            "doubling_days": summary.doubling_days,
            "inflation_adjusted_amount": summary.inflation_adjusted_amount,
        }
        for scenario, summary in results
    ]
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame(rows).set_index("scenario")
