"""
Custom exceptions for compoundcalc.

Purpose
-------
Provides a unified exception hierarchy for the projection engine so that
callers can tell apart "the inputs are unusable" from "the reverse solve is
undefined for these inputs". All exceptions inherit from CompoundCalcError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
CompoundCalcError (base)
├── ConfigurationError - Invalid configuration files or settings
├── ValidationError - Inputs rejected before any computation
│   ├── MissingInputError - Required input absent or not a number
│   └── InvalidPeriodError - Compounding period length <= 0
└── SolverError - Reverse solve failures
    └── DegenerateSolveError - n = 0 or non-positive exponentiation base

Note that a target that is never reached is *not* an error: first_hit()
returns None for that case.

Usage
-----
>>> from compoundcalc.exceptions import MissingInputError, DegenerateSolveError
>>>
>>> try:
...     rate = solve_rate(principal=0, target_amount=2000, total_days=30, period_days=1)
... except DegenerateSolveError as e:
...     print(f"Cannot solve: {e.reason}")
"""

from typing import Optional, Sequence


class CompoundCalcError(Exception):
    """
    Base exception for all compoundcalc errors.

    Examples
    --------
    >>> try:
    ...     projection = project(params)
    ... except CompoundCalcError as e:
    ...     logger.error(f"Projection failed: {e}")
    """
    pass


class ConfigurationError(CompoundCalcError):
    """
    Invalid configuration content.

    Raised when a JSON parameters/comparison file or a persisted state
    record cannot be turned into engine inputs.
    """
    pass


class ValidationError(CompoundCalcError):
    """
    Input validation failures.

    Raised before any series is generated; no partial projection is ever
    returned alongside one of these.
    """
    pass


class MissingInputError(ValidationError):
    """
    One or more required inputs are absent or not valid numbers.

    The required inputs are principal, annual rate, total days and period
    days. ``fields`` lists every offending input, not just the first one.

    Examples
    --------
    >>> raise MissingInputError(["principal", "total_days"])
    """

    def __init__(self, fields: Sequence[str], message: Optional[str] = None):
        self.fields = list(fields)
        if message is None:
            message = (
                f"Missing or non-numeric input(s): {', '.join(self.fields)}. "
                f"Provide a finite number for each."
            )
        super().__init__(message)


class InvalidPeriodError(ValidationError):
    """
    Compounding period length is not a positive whole number of days.

    Examples
    --------
    >>> raise InvalidPeriodError(0)
    """

    def __init__(self, period_days: object):
        self.period_days = period_days
        super().__init__(
            f"period_days must be a positive whole number of days, got {period_days!r}."
        )


class SolverError(CompoundCalcError):
    """Reverse solve failures."""
    pass


class DegenerateSolveError(SolverError):
    """
    The closed-form inverse is undefined for the given inputs.

    Raised when the horizon holds no complete period (n = 0) or when the
    base of the exponentiation is not positive (principal <= 0 or
    target <= 0 for solve_rate, 1 + rate/100 <= 0 for solve_principal).

    Examples
    --------
    >>> raise DegenerateSolveError(
    ...     "horizon contains no complete period (total_days=5 < period_days=7)"
    ... )
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Reverse solve is undefined: {reason}.")
