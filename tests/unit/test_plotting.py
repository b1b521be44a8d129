"""
Unit tests for plotting.py module.
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pytest

from compoundcalc.comparison import Scenario, compare
from compoundcalc.constants import DEFAULT_SCENARIO_COLORS
from compoundcalc.plotting import plot_comparison, plot_projection


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestPlotProjection:

    def test_area(self, daily_projection):
        fig, ax = plot_projection(daily_projection, return_fig_ax=True)
        assert len(ax.lines) == 1
        assert len(ax.collections) == 1
        assert ax.get_ylabel() == "Amount (INR)"

    def test_line(self, daily_projection):
        _, ax = plot_projection(daily_projection, kind="line", return_fig_ax=True)
        assert len(ax.lines) == 1
        assert list(ax.lines[0].get_ydata()) == list(daily_projection.amounts)

    def test_bar(self, daily_projection):
        _, ax = plot_projection(daily_projection, kind="bar", return_fig_ax=True)
        assert len(ax.patches) == len(daily_projection)

    def test_target_line(self, daily_projection):
        _, ax = plot_projection(daily_projection, kind="line", target=1200, return_fig_ax=True)
        assert len(ax.lines) == 2
        assert ax.get_legend() is not None

    def test_unknown_kind(self, daily_projection):
        with pytest.raises(ValueError, match="kind"):
            plot_projection(daily_projection, kind="pie")

    def test_returns_none_by_default(self, daily_projection):
        assert plot_projection(daily_projection) is None

    def test_save(self, tmp_path, daily_projection):
        path = tmp_path / "chart.png"
        plot_projection(daily_projection, currency="USD", save_path=str(path))
        assert path.exists()


class TestPlotComparison:

    def test_one_line_per_scenario(self, scenarios):
        _, ax = plot_comparison(scenarios, period_days=1, return_fig_ax=True)
        assert [line.get_label() for line in ax.lines] == ["Cautious", "Balanced", "Bold"]

    def test_scenario_colors(self, scenarios):
        _, ax = plot_comparison(scenarios, period_days=1, return_fig_ax=True)
        assert ax.lines[0].get_color() == "#82ca9d"
        assert ax.lines[1].get_color() == DEFAULT_SCENARIO_COLORS[1]

    def test_target(self, scenarios):
        _, ax = plot_comparison(scenarios, period_days=1, target=1200, return_fig_ax=True)
        assert len(ax.lines) == 4

    def test_annualized_series_match_compare(self):
        scenario = Scenario("Yearly 12%", principal=1000, annual_rate_percent=12, total_days=365)
        _, ax = plot_comparison([scenario], period_days=30, rate_mode="annualized",
                                return_fig_ax=True)
        [(_, summary)] = compare([scenario], period_days=30, rate_mode="annualized")
        assert ax.lines[0].get_ydata()[-1] == pytest.approx(summary.final_amount)
        assert summary.final_amount == pytest.approx(1118.26, abs=0.01)

    def test_empty(self):
        with pytest.raises(ValueError):
            plot_comparison([], period_days=1)
