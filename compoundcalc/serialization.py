"""
Serialization module for compoundcalc persistence and export.

Purpose
-------
Reads and writes the plain files that sit around the engine:

- Parameters / comparison input files (JSON, validated by config models)
- The persisted "last projection" record: a flat key-value JSON object
  holding the parameters and resulting summary, so a session can be restored
- CSV export of a projection (Period, Day, Amount rows)

Design Principles
-----------------
- Type-safe: Uses Pydantic configs for validation
- Human-readable: JSON and CSV only
- Versioned: the state record carries a schema version; mismatches warn

Example
-------
>>> from pathlib import Path
>>> params = Parameters(principal=1000, annual_rate_percent=5, total_days=30, period_days=1)
>>> projection = project(params)
>>> save_state(Path("last.json"), params, summarize(params, projection), currency="USD")
>>> restored, record = load_state(Path("last.json"))
>>> export_csv(projection, Path("compound_interest.csv"))
"""

from __future__ import annotations
from dataclasses import asdict
from typing import Any, Dict, Tuple
from pathlib import Path
import json
import logging
import warnings

import pydantic

from .config import ComparisonConfig, ParametersConfig
from .constants import DEFAULT_CURRENCY
from .exceptions import ConfigurationError
from .projection import Parameters, Projection
from .summary import Summary
from .types import ParametersDict, StateRecordDict, SummaryDict

__all__ = [
    "SCHEMA_VERSION",
    "parameters_to_dict",
    "parameters_from_dict",
    "summary_to_dict",
    "load_parameters_file",
    "load_comparison_file",
    "save_state",
    "load_state",
    "reset_state",
    "export_csv",
]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Schema Version
# ---------------------------------------------------------------------------

SCHEMA_VERSION = "0.1.0"

CSV_COLUMNS = {"period": "Period", "day": "Day", "amount": "Amount"}


# ---------------------------------------------------------------------------
# Parameters / Summary
# ---------------------------------------------------------------------------

def parameters_to_dict(params: Parameters) -> ParametersDict:
    """Convert Parameters to their file representation."""
    return ParametersConfig.from_parameters(params).model_dump()


def parameters_from_dict(data: Dict[str, Any]) -> Parameters:
    """
    Create Parameters from their file representation.

    Raises
    ------
    ConfigurationError
        If *data* does not match the ParametersConfig schema.
    """
    try:
        config = ParametersConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid parameters: {e}") from e
    return config.to_parameters()


def summary_to_dict(summary: Summary) -> SummaryDict:
    """Flat dictionary of a Summary's fields."""
    return asdict(summary)


# ---------------------------------------------------------------------------
# Input Files
# ---------------------------------------------------------------------------

def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"{path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a JSON object")
    return data


def load_parameters_file(path: Path) -> ParametersConfig:
    """
    Load and validate a projection parameters file.

    Examples
    --------
    >>> cfg = load_parameters_file(Path("params.json"))
    >>> params = cfg.to_parameters()
    """
    data = _read_json(path)
    data.pop("schema_version", None)
    try:
        return ParametersConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid parameters file {path}: {e}") from e


def load_comparison_file(path: Path) -> ComparisonConfig:
    """Load and validate a scenario comparison file."""
    data = _read_json(path)
    data.pop("schema_version", None)
    try:
        return ComparisonConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid comparison file {path}: {e}") from e


# ---------------------------------------------------------------------------
# Persisted State
# ---------------------------------------------------------------------------

def save_state(
    path: Path,
    params: Parameters,
    summary: Summary,
    currency: str = DEFAULT_CURRENCY,
) -> StateRecordDict:
    """
    Persist the last projection as a flat key-value JSON record.

    Parameters
    ----------
    path : Path
        Output file path; parent directories are created.
    params : Parameters
        Inputs of the projection.
    summary : Summary
        Its summary.
    currency : str
        Display label to restore alongside.

    Returns
    -------
    StateRecordDict
        The record written.
    """
    record: Dict[str, Any] = {"schema_version": SCHEMA_VERSION, "currency": currency}
    record.update(parameters_to_dict(params))
    record.update(summary_to_dict(summary))

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(record, f, indent=2)
    logger.debug("Saved projection state to %s", path)
    return record


def load_state(path: Path) -> Tuple[Parameters, StateRecordDict]:
    """
    Restore the persisted record written by save_state().

    Returns
    -------
    (Parameters, StateRecordDict)
        Rebuilt parameters and the raw record (summary figures, currency).

    Raises
    ------
    ConfigurationError
        If the record is malformed.
    """
    record = _read_json(path)

    schema_version = record.get("schema_version", "0.0.0")
    if schema_version != SCHEMA_VERSION:
        warnings.warn(
            f"State schema version {schema_version} differs from current "
            f"version {SCHEMA_VERSION}. May encounter compatibility issues.",
            UserWarning,
        )

    param_keys = ParametersConfig.model_fields.keys()
    params = parameters_from_dict({k: v for k, v in record.items() if k in param_keys})
    return params, record


def reset_state(path: Path) -> bool:
    """Delete the persisted record. Returns False if there was none."""
    if not path.exists():
        return False
    path.unlink()
    logger.debug("Removed projection state %s", path)
    return True


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------

def export_csv(projection: Projection, path: Path) -> Path:
    """
    Write the projection as CSV with a Period,Day,Amount header.

    Examples
    --------
    >>> export_csv(projection, Path("compound_interest.csv"))
    """
    frame = projection.to_frame().rename(columns=CSV_COLUMNS)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    return path
