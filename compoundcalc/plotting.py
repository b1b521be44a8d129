"""
Plotting utilities for compoundcalc projections.

Purpose
-------
Renders Projection series as charts. The engine never imports this module;
it is a consumer of Projection values like any other collaborator.

Functions
---------
- plot_projection(): one series as an area, line or bar chart, with an
  optional horizontal target line
- plot_comparison(): several scenario series overlaid on one axis

Both accept ``save_path`` to write the figure and ``return_fig_ax`` to hand
the matplotlib objects back to the caller for further styling.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .constants import (
    CHART_KINDS,
    DEFAULT_ALPHA_FILL,
    DEFAULT_CURRENCY,
    DEFAULT_FIGSIZE,
    DEFAULT_FIGSIZE_WIDE,
    DEFAULT_LINEWIDTH,
    DEFAULT_SCENARIO_COLORS,
)
from .comparison import Scenario, project_scenarios
from .projection import Projection

__all__ = ["plot_projection", "plot_comparison"]


def plot_projection(
    projection: Projection,
    kind: str = "area",
    *,
    target: Optional[float] = None,
    currency: str = DEFAULT_CURRENCY,
    title: str = "Compound Interest Projection",
    figsize: Tuple[int, int] = DEFAULT_FIGSIZE,
    color: str = DEFAULT_SCENARIO_COLORS[0],
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Plot a projection against its day offsets.

    Parameters
    ----------
    projection : Projection
        Series to draw.
    kind : {"area", "line", "bar"}, default "area"
        Chart style.
    target : float, optional
        Draws a dashed reference line at this amount when given.
    currency : str
        Label for the y axis.
    title, figsize, color
        Cosmetics.
    save_path : str, optional
        Write the figure to this path (150 dpi).
    return_fig_ax : bool, default False
        Return (fig, ax) instead of None.
    """
    if kind not in CHART_KINDS:
        raise ValueError(f"kind must be one of {CHART_KINDS}, got {kind!r}")

    import matplotlib.pyplot as plt

    days = projection.day_offsets
    amounts = projection.amounts

    fig, ax = plt.subplots(figsize=figsize)

    if kind == "line":
        ax.plot(days, amounts, color=color, linewidth=DEFAULT_LINEWIDTH)
    elif kind == "bar":
        width = max(projection.period_days * 0.8, 0.8)
        ax.bar(days, amounts, width=width, color=color)
    else:
        ax.plot(days, amounts, color=color, linewidth=DEFAULT_LINEWIDTH)
        ax.fill_between(days, amounts, color=color, alpha=DEFAULT_ALPHA_FILL)

    if target is not None:
        ax.axhline(target, color="red", linestyle="--", linewidth=1.5,
                   label=f"Target ({target:,.2f})")
        ax.legend(loc="best", fontsize=10)

    ax.set_xlabel("Day", fontsize=11)
    ax.set_ylabel(f"Amount ({currency})", fontsize=11)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, bbox_inches="tight", dpi=150)

    if return_fig_ax:
        return fig, ax
    return None


def plot_comparison(
    scenarios: Sequence[Scenario],
    period_days: int,
    *,
    target: Optional[float] = None,
    rate_mode: str = "per_period",
    currency: str = DEFAULT_CURRENCY,
    title: str = "Scenario Comparison",
    figsize: Tuple[int, int] = DEFAULT_FIGSIZE_WIDE,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Overlay the projections of several scenarios.

    Each scenario is projected with the shared *period_days* and *rate_mode*
    (and no contribution), as in compare(). Scenarios without a color cycle through
    DEFAULT_SCENARIO_COLORS.
    """
    if not scenarios:
        raise ValueError("plot_comparison requires at least one scenario")

    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)

    series = project_scenarios(scenarios, period_days, rate_mode)
    for i, (scenario, projection) in enumerate(series):
        color = scenario.color or DEFAULT_SCENARIO_COLORS[i % len(DEFAULT_SCENARIO_COLORS)]
        ax.plot(projection.day_offsets, projection.amounts, label=scenario.name,
                color=color, linewidth=DEFAULT_LINEWIDTH)

    if target is not None:
        ax.axhline(target, color="red", linestyle="--", linewidth=1.5, label="Target")

    ax.set_xlabel("Day", fontsize=11)
    ax.set_ylabel(f"Amount ({currency})", fontsize=11)
    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.legend(loc="best", fontsize=10)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, bbox_inches="tight", dpi=150)

    if return_fig_ax:
        return fig, ax
    return None
