"""
Configuration management module for compoundcalc.

Purpose
-------
Pydantic models for the inputs that arrive from files and the environment:
projection parameters, comparison scenarios, and application settings.
They validate shape and ranges at the boundary and convert into the
engine's own frozen dataclasses.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Serializable: model_dump()/model_validate_json() for config files
- Environment-aware: AppSettings reads COMPOUNDCALC_* variables and .env

Example
-------
>>> from compoundcalc.config import ParametersConfig
>>> cfg = ParametersConfig(principal=1000, annual_rate_percent=5,
...                        total_days=30, period_days=1)
>>> params = cfg.to_parameters()
>>> cfg.model_dump_json()
"""

from __future__ import annotations
from typing import List, Literal, Optional
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .comparison import Scenario
from .constants import (
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY,
    DEFAULT_PERIOD_DAYS,
    DEFAULT_PRINCIPAL,
    DEFAULT_RATE_PERCENT,
    DEFAULT_TOTAL_DAYS,
)
from .projection import Parameters

__all__ = [
    "ParametersConfig",
    "ScenarioConfig",
    "ComparisonConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Projection Parameters
# ---------------------------------------------------------------------------

class ParametersConfig(BaseModel):
    """
    File representation of a single projection's inputs.

    Attributes
    ----------
    principal : float
        Capital at period 0 (>= 0).
    annual_rate_percent : float
        Rate in percent; negative values model decay.
    total_days : int
        Horizon in days (>= 0).
    period_days : int
        Compounding period in days (> 0).
    contribution_per_period : float
        Amount added after each period.
    target_amount : float, optional
        Threshold to detect (> 0).
    inflation_rate_percent : float
        Annual inflation in percent (> -100).
    rate_mode : str
        "per_period" (stated rate applied each period) or "annualized".

    Examples
    --------
    >>> ParametersConfig(principal=1000, annual_rate_percent=5,
    ...                  total_days=365, period_days=30, target_amount=1500)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    principal: float = Field(
        default=DEFAULT_PRINCIPAL,
        ge=0,
        description="Initial capital"
    )
    annual_rate_percent: float = Field(
        default=DEFAULT_RATE_PERCENT,
        description="Rate in percent (negative = decay)"
    )
    total_days: int = Field(
        default=DEFAULT_TOTAL_DAYS,
        ge=0,
        description="Horizon length in days"
    )
    period_days: int = Field(
        default=DEFAULT_PERIOD_DAYS,
        gt=0,
        description="Compounding period length in days"
    )
    contribution_per_period: float = Field(
        default=0.0,
        description="Contribution added after each period"
    )
    target_amount: Optional[float] = Field(
        default=None,
        gt=0,
        description="Target amount to detect"
    )
    inflation_rate_percent: float = Field(
        default=0.0,
        gt=-100,
        description="Annual inflation in percent"
    )
    rate_mode: Literal["per_period", "annualized"] = Field(
        default="per_period",
        description="How the rate maps onto one period"
    )

    def to_parameters(self) -> Parameters:
        """Convert to engine Parameters."""
        return Parameters(**self.model_dump())

    @classmethod
    def from_parameters(cls, params: Parameters) -> "ParametersConfig":
        """Inverse of to_parameters()."""
        return cls(
            principal=params.principal,
            annual_rate_percent=params.annual_rate_percent,
            total_days=int(params.total_days),
            period_days=int(params.period_days),
            contribution_per_period=params.contribution_per_period,
            target_amount=params.target_amount,
            inflation_rate_percent=params.inflation_rate_percent,
            rate_mode=params.rate_mode,
        )


# ---------------------------------------------------------------------------
# Scenario Comparison
# ---------------------------------------------------------------------------

class ScenarioConfig(BaseModel):
    """One scenario of a comparison file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(
        min_length=1,
        max_length=100,
        description="Scenario label"
    )
    principal: float = Field(
        ge=0,
        description="Initial capital"
    )
    annual_rate_percent: float = Field(
        description="Rate in percent"
    )
    total_days: int = Field(
        ge=0,
        description="Horizon length in days"
    )
    color: Optional[str] = Field(
        default=None,
        max_length=32,
        description="Display color (e.g. '#8884d8')"
    )

    def to_scenario(self) -> Scenario:
        return Scenario(**self.model_dump())


class ComparisonConfig(BaseModel):
    """
    File representation of a scenario comparison.

    The compounding period, target and inflation are shared by every
    scenario; scenarios carry only principal, rate and horizon.

    Examples
    --------
    >>> ComparisonConfig(
    ...     period_days=30,
    ...     target_amount=1500,
    ...     scenarios=[
    ...         ScenarioConfig(name="Low", principal=1000, annual_rate_percent=1, total_days=365),
    ...         ScenarioConfig(name="High", principal=1000, annual_rate_percent=3, total_days=365),
    ...     ],
    ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    period_days: int = Field(
        default=DEFAULT_PERIOD_DAYS,
        gt=0,
        description="Compounding period shared by all scenarios"
    )
    target_amount: Optional[float] = Field(
        default=None,
        gt=0,
        description="Target detected in every scenario"
    )
    inflation_rate_percent: float = Field(
        default=0.0,
        gt=-100,
        description="Annual inflation in percent"
    )
    rate_mode: Literal["per_period", "annualized"] = Field(
        default="per_period",
        description="How the rate maps onto one period"
    )
    scenarios: List[ScenarioConfig] = Field(
        min_length=1,
        description="Scenarios to compare, in display order"
    )

    @field_validator("scenarios")
    @classmethod
    def validate_unique_names(cls, v):
        """Scenario names label table rows, so they must be unique."""
        names = [s.name for s in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate scenario names: {duplicates}")
        return v

    def to_scenarios(self) -> List[Scenario]:
        return [s.to_scenario() for s in self.scenarios]


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Supports .env files for local development. Environment variables
    are prefixed with COMPOUNDCALC_ (e.g., COMPOUNDCALC_CURRENCY=USD).

    Attributes
    ----------
    debug : bool
        Enable debug mode (forces DEBUG logging)
    log_level : str
        Logging level: "DEBUG", "INFO", "WARNING", "ERROR"
    currency : str
        Display label for amounts. No conversion is ever applied.
    state_file : Path
        Where the last computed projection is persisted.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.currency
    'INR'
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPOUNDCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        description="Display currency label"
    )
    state_file: Path = Field(
        default=Path.home() / ".cache" / "compoundcalc" / "last_projection.json",
        description="Persisted last-projection record"
    )

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v):
        """Only labels with a known symbol are offered."""
        if v not in CURRENCY_SYMBOLS:
            raise ValueError(
                f"currency must be one of {sorted(CURRENCY_SYMBOLS)}, got {v!r}"
            )
        return v

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level
