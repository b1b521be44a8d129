"""
compoundcalc - Compound Interest Projection Engine

A small, deterministic engine for projecting an account period by period,
summarizing the result, reverse-solving for a required rate or principal,
and comparing scenarios.

Modules
-------
- projection    : Parameters, Projection and the forward recurrence
- target        : First day a projection reaches a target
- summary       : Interest earned, doubling time, inflation-adjusted value
- solver        : Required rate / principal (contribution-free inverse)
- comparison    : Multi-scenario runs under a shared period length
- config        : Pydantic models for files and environment settings
- serialization : Persisted state, input files, CSV export
- plotting      : Matplotlib charts of projections
- cli           : Command-line interface

"""

from .exceptions import (
    CompoundCalcError,
    ConfigurationError,
    ValidationError,
    MissingInputError,
    InvalidPeriodError,
    SolverError,
    DegenerateSolveError,
)
from .projection import Parameters, ProjectionPoint, Projection, project
from .target import first_hit, target_reached
from .summary import Summary, summarize
from .solver import ReverseSolution, solve_rate, solve_principal, reverse_solve
from .comparison import Scenario, compare, comparison_table

__version__ = "0.1.0"
