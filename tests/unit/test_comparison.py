"""
Unit tests for comparison.py module.
"""

import pandas as pd
import pytest

from compoundcalc.comparison import (
    Scenario,
    compare,
    comparison_table,
    project_scenarios,
    scenario_parameters,
)
from compoundcalc.exceptions import InvalidPeriodError, MissingInputError, ValidationError
from compoundcalc.projection import Parameters, project
from compoundcalc.summary import summarize


class TestScenario:

    def test_empty_name(self):
        with pytest.raises(ValidationError):
            Scenario("", principal=1000, annual_rate_percent=5, total_days=30)

    def test_parameters_use_shared_period_and_no_contribution(self, scenarios):
        params = scenario_parameters(scenarios[0], period_days=7, target_amount=1100)
        assert params.period_days == 7
        assert params.contribution_per_period == 0.0
        assert params.target_amount == 1100
        assert params.annual_rate_percent == 2


class TestCompare:

    def test_preserves_input_order(self, scenarios):
        results = compare(scenarios, period_days=1, target_amount=1200)
        assert [s.name for s, _ in results] == ["Cautious", "Balanced", "Bold"]

    def test_target_hit_days(self, scenarios):
        results = compare(scenarios, period_days=1, target_amount=1200)
        assert [summary.target_hit_day for _, summary in results] == [10, 4, 3]

    def test_matches_single_projection(self, scenarios):
        """Each result equals summarizing that scenario on its own."""
        results = compare(scenarios, period_days=1, target_amount=1200)
        balanced = Parameters(principal=1000, annual_rate_percent=5, total_days=30,
                              period_days=1, target_amount=1200)
        assert results[1][1] == summarize(balanced, project(balanced))

    def test_empty(self):
        assert compare([], period_days=1) == []

    @pytest.mark.parametrize("period", [0, -1, 1.5])
    def test_invalid_period_checked_first(self, scenarios, period):
        with pytest.raises(InvalidPeriodError):
            compare(scenarios, period_days=period)

    def test_invalid_period_even_without_scenarios(self):
        with pytest.raises(InvalidPeriodError):
            compare([], period_days=0)

    def test_bad_scenario_input(self):
        bad = Scenario("Broken", principal=None, annual_rate_percent=5, total_days=30)
        with pytest.raises(MissingInputError):
            compare([bad], period_days=1)

    def test_inflation_shared(self, scenarios):
        results = compare(scenarios, period_days=1, inflation_rate_percent=5)
        for _, summary in results:
            assert summary.inflation_adjusted_amount < summary.final_amount

    def test_color_ignored_by_computation(self):
        a = Scenario("A", principal=1000, annual_rate_percent=5, total_days=30, color="#000000")
        b = Scenario("B", principal=1000, annual_rate_percent=5, total_days=30)
        (_, sa), (_, sb) = compare([a, b], period_days=1)
        assert sa == sb


class TestProjectScenarios:

    def test_projections(self, scenarios):
        results = project_scenarios(scenarios, period_days=1)
        assert len(results) == 3
        assert all(len(projection) == 31 for _, projection in results)

    def test_invalid_period(self, scenarios):
        with pytest.raises(InvalidPeriodError):
            project_scenarios(scenarios, period_days=0)


class TestComparisonTable:

    def test_columns_and_index(self, scenarios):
        table = comparison_table(compare(scenarios, period_days=1, target_amount=1200))
        assert isinstance(table, pd.DataFrame)
        assert list(table.index) == ["Cautious", "Balanced", "Bold"]
        assert "final_amount" in table.columns
        assert table.loc["Balanced", "final_amount"] == pytest.approx(4321.94, abs=0.005)
        assert table.loc["Bold", "target_hit_day"] == 3

    def test_empty(self):
        table = comparison_table([])
        assert table.empty
        assert "interest_earned" in table.columns
