"""
Global constants for compoundcalc.

Purpose
-------
Centralizes default values and magic numbers used throughout the package so
the engine, the CLI and the rendering helpers agree on them.

Usage
-----
>>> from compoundcalc.constants import PERIOD_OPTIONS, DAYS_PER_YEAR
>>> PERIOD_OPTIONS["Weekly"]
7

Categories
----------
- Calendar: period options, days per year
- Statistics: Rule-of-72 constant, rounding precision
- Defaults: form defaults used by the CLI
- Display: currencies, plotting defaults
"""

from typing import Dict, Tuple

__all__ = [
    # Calendar
    "PERIOD_OPTIONS",
    "DAYS_PER_YEAR",
    # Statistics
    "RULE_OF_72",
    "AMOUNT_DECIMALS",
    "RATE_MODES",
    "NOT_REACHED",
    # Defaults
    "DEFAULT_PRINCIPAL",
    "DEFAULT_RATE_PERCENT",
    "DEFAULT_TOTAL_DAYS",
    "DEFAULT_PERIOD_DAYS",
    "DEFAULT_CURRENCY",
    # Display
    "CURRENCY_SYMBOLS",
    "CHART_KINDS",
    "DEFAULT_FIGSIZE",
    "DEFAULT_FIGSIZE_WIDE",
    "DEFAULT_LINEWIDTH",
    "DEFAULT_ALPHA_FILL",
    "DEFAULT_SCENARIO_COLORS",
]


# =============================================================================
# Calendar
# =============================================================================

PERIOD_OPTIONS: Dict[str, int] = {
    "Daily": 1,
    "Weekly": 7,
    "Monthly": 30,
    "Yearly": 365,
}
"""Conventional compounding cadences (label -> period length in days).

Any positive whole number of days is accepted by the engine; these are the
choices offered to users.
"""

DAYS_PER_YEAR: int = 365
"""Days per year used by inflation discounting and the Rule of 72."""


# =============================================================================
# Statistics
# =============================================================================

RULE_OF_72: float = 72.0
"""Numerator of the Rule-of-72 doubling-time heuristic (years = 72 / rate%)."""

AMOUNT_DECIMALS: int = 2
"""Decimal places kept on emitted projection amounts."""

RATE_MODES: Tuple[str, ...] = ("per_period", "annualized")
"""How annual_rate_percent is applied to each period.

"per_period" applies the stated rate once per period regardless of period
length; "annualized" converts it to the equivalent compounded per-period
rate first.
"""

NOT_REACHED: str = "not reached"
"""Display value for a target that the projection never reaches."""


# =============================================================================
# Defaults
# =============================================================================

DEFAULT_PRINCIPAL: float = 1000.0
DEFAULT_RATE_PERCENT: float = 5.0
DEFAULT_TOTAL_DAYS: int = 30
DEFAULT_PERIOD_DAYS: int = 1
DEFAULT_CURRENCY: str = "INR"


# =============================================================================
# Display
# =============================================================================

CURRENCY_SYMBOLS: Dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
}
"""Supported currency labels. Display only; no conversion is performed."""

CHART_KINDS: Tuple[str, ...] = ("area", "line", "bar")
"""Chart styles offered by plot_projection()."""

DEFAULT_FIGSIZE: Tuple[int, int] = (12, 6)
"""Default figure size (width, height) in inches for a single projection."""

DEFAULT_FIGSIZE_WIDE: Tuple[int, int] = (14, 6)
"""Figure size for scenario comparison plots."""

DEFAULT_LINEWIDTH: float = 2.0
"""Line width for projection series."""

DEFAULT_ALPHA_FILL: float = 0.3
"""Alpha (transparency) for area fills."""

DEFAULT_SCENARIO_COLORS: Tuple[str, ...] = (
    "#8884d8",
    "#82ca9d",
    "#ffc658",
    "#ff7f50",
    "#a4de6c",
)
"""Fallback colors cycled across scenarios that carry no color of their own."""
