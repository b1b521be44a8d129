"""
Pytest configuration and fixtures for the compoundcalc test suite.

Fixtures follow the principle of "arrange-act-assert" with clear separation.
"""

from typing import List

import pytest

from compoundcalc.projection import Parameters, project
from compoundcalc.comparison import Scenario


# ---------------------------------------------------------------------------
# Parameter Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def daily_params() -> Parameters:
    """
    Default calculator inputs.

    Principal: 1,000
    Rate: 5% applied every period
    Horizon: 30 days of daily periods
    """
    return Parameters(
        principal=1000,
        annual_rate_percent=5,
        total_days=30,
        period_days=1,
    )


@pytest.fixture
def daily_params_with_target(daily_params) -> Parameters:
    """Default inputs with a 1,200 target (first reached on day 4)."""
    return Parameters(
        principal=daily_params.principal,
        annual_rate_percent=daily_params.annual_rate_percent,
        total_days=daily_params.total_days,
        period_days=daily_params.period_days,
        target_amount=1200,
    )


@pytest.fixture
def contribution_params() -> Parameters:
    """
    Monthly periods with contributions.

    Principal: 1,000, rate 10%, 90 days of 30-day periods, +100 per period.
    Series: 1000, 1200, 1420, 1662.
    """
    return Parameters(
        principal=1000,
        annual_rate_percent=10,
        total_days=90,
        period_days=30,
        contribution_per_period=100,
    )


@pytest.fixture
def daily_projection(daily_params):
    return project(daily_params)


# ---------------------------------------------------------------------------
# Scenario Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def scenarios() -> List[Scenario]:
    """Three scenarios differing only in rate, listed low to high."""
    return [
        Scenario("Cautious", principal=1000, annual_rate_percent=2, total_days=30, color="#82ca9d"),
        Scenario("Balanced", principal=1000, annual_rate_percent=5, total_days=30),
        Scenario("Bold", principal=1000, annual_rate_percent=8, total_days=30, color="#ff7f50"),
    ]


# ---------------------------------------------------------------------------
# Environment Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def state_file(tmp_path, monkeypatch):
    """Point AppSettings.state_file at a temporary path."""
    path = tmp_path / "state" / "last_projection.json"
    monkeypatch.setenv("COMPOUNDCALC_STATE_FILE", str(path))
    return path
