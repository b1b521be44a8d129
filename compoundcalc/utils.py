"""General utilities for compoundcalc

Contents
--------
- Input coercion and validation helpers
- Period arithmetic (steps in a horizon)
- Rate conversions (annual <-> per-period, compounded)
- Rounding helpers (2 dp amounts, half-up integer rounding)
- Display formatters (currency labels)
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Dict, Mapping, Optional

from .constants import AMOUNT_DECIMALS, CURRENCY_SYMBOLS, DAYS_PER_YEAR
from .exceptions import InvalidPeriodError, MissingInputError

__all__ = [
    # Validation
    "to_number",
    "require_numbers",
    "check_period_days",
    # Periods
    "period_count",
    # Rates
    "annual_to_period",
    "period_to_annual",
    # Rounding
    "round2",
    "round_half_up",
    # Formatters
    "format_currency",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def to_number(value: object) -> Optional[float]:
    """Return *value* as a finite float, or None if it is not a usable number.

    Accepts real numbers and numeric strings (form inputs arrive as text).
    None, empty strings, booleans, NaN and infinities are all unusable.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    elif isinstance(value, Real):
        number = float(value)
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def require_numbers(values: Mapping[str, object]) -> Dict[str, float]:
    """Coerce every entry of *values* with to_number().

    Raises MissingInputError naming *all* entries that could not be coerced,
    so a caller can report every bad field at once.
    """
    coerced: Dict[str, float] = {}
    missing = []
    for name, value in values.items():
        number = to_number(value)
        if number is None:
            missing.append(name)
        else:
            coerced[name] = number
    if missing:
        raise MissingInputError(missing)
    return coerced


def check_period_days(period_days: float) -> int:
    """Return *period_days* as an int, raising InvalidPeriodError unless it is
    a positive whole number."""
    if period_days <= 0 or float(period_days) != int(period_days):
        raise InvalidPeriodError(period_days)
    return int(period_days)


# ---------------------------------------------------------------------------
# Periods
# ---------------------------------------------------------------------------

def period_count(total_days: float, period_days: int) -> int:
    """Number of complete periods in the horizon: floor(total_days / period_days)."""
    return int(math.floor(total_days / period_days))


# ---------------------------------------------------------------------------
# Rate conversions (compounded)
# ---------------------------------------------------------------------------

def annual_to_period(r_annual: float, period_days: int) -> float:
    """Convert an annual rate to the equivalent compounded per-period rate.

    Uses: (1 + r_a) ** (period_days / 365) - 1. Accepts negative values as well.
    """
    return float((1.0 + r_annual) ** (period_days / DAYS_PER_YEAR) - 1.0)


def period_to_annual(r_period: float, period_days: int) -> float:
    """Convert a per-period rate to the equivalent compounded annual rate.

    Uses: (1 + r_p) ** (365 / period_days) - 1. Accepts negative values as well.
    """
    return float((1.0 + r_period) ** (DAYS_PER_YEAR / period_days) - 1.0)


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round2(value: float) -> float:
    """Round a monetary amount to AMOUNT_DECIMALS places."""
    return round(float(value), AMOUNT_DECIMALS)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (3284.5 -> 3285)."""
    return int(math.floor(value + 0.5))


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def format_currency(value: float, currency: str = "INR", decimals: int = 2) -> str:
    """
    Format an amount with its currency label for tables and annotations.

    Parameters
    ----------
    value : float
        Amount in display units.
    currency : str, default "INR"
        Currency label. Known labels get their symbol; unknown labels are
        used verbatim as a prefix.
    decimals : int, default 2
        Decimal places to show.

    Returns
    -------
    str
        Formatted string with thousands separators.

    Examples
    --------
    >>> format_currency(4321.94, "USD")
    '$4,321.94'
    >>> format_currency(1000, "GBP", decimals=0)
    'GBP 1,000'
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    body = f"{value:,.{decimals}f}"
    if symbol is None:
        return f"{currency} {body}"
    return f"{symbol}{body}"
