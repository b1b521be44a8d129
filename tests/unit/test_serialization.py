"""
Unit tests for serialization.py module.

Tests input files, the persisted state record and CSV export.
"""

import json

import pandas as pd
import pytest

from compoundcalc.exceptions import ConfigurationError
from compoundcalc.projection import project
from compoundcalc.serialization import (
    SCHEMA_VERSION,
    export_csv,
    load_comparison_file,
    load_parameters_file,
    load_state,
    parameters_from_dict,
    parameters_to_dict,
    reset_state,
    save_state,
)
from compoundcalc.summary import summarize


# ============================================================================
# PARAMETERS
# ============================================================================

class TestParametersDict:

    def test_round_trip(self, contribution_params):
        assert parameters_from_dict(parameters_to_dict(contribution_params)) == contribution_params

    def test_invalid(self):
        with pytest.raises(ConfigurationError, match="Invalid parameters"):
            parameters_from_dict({"principal": -5})


# ============================================================================
# INPUT FILES
# ============================================================================

class TestInputFiles:

    def test_load_parameters_file(self, tmp_path):
        path = tmp_path / "params.json"
        path.write_text(json.dumps({"schema_version": SCHEMA_VERSION,
                                    "principal": 2000, "period_days": 7}))
        cfg = load_parameters_file(path)
        assert cfg.principal == 2000
        assert cfg.period_days == 7

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_parameters_file(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_parameters_file(path)

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "params.json"
        path.write_text(json.dumps({"period_days": 0}))
        with pytest.raises(ConfigurationError):
            load_parameters_file(path)

    def test_load_comparison_file(self, tmp_path):
        path = tmp_path / "compare.json"
        path.write_text(json.dumps({
            "period_days": 30,
            "target_amount": 1500,
            "scenarios": [
                {"name": "Low", "principal": 1000, "annual_rate_percent": 1, "total_days": 365},
                {"name": "High", "principal": 1000, "annual_rate_percent": 3, "total_days": 365},
            ],
        }))
        cfg = load_comparison_file(path)
        assert cfg.period_days == 30
        assert [s.name for s in cfg.scenarios] == ["Low", "High"]

    def test_comparison_without_scenarios(self, tmp_path):
        path = tmp_path / "compare.json"
        path.write_text(json.dumps({"period_days": 30, "scenarios": []}))
        with pytest.raises(ConfigurationError):
            load_comparison_file(path)


# ============================================================================
# PERSISTED STATE
# ============================================================================

class TestState:

    def test_save_and_load(self, tmp_path, daily_params_with_target):
        path = tmp_path / "nested" / "state.json"
        summary = summarize(daily_params_with_target, project(daily_params_with_target))

        record = save_state(path, daily_params_with_target, summary, currency="USD")
        assert path.exists()
        assert record["schema_version"] == SCHEMA_VERSION
        assert record["currency"] == "USD"
        assert record["target_hit_day"] == 4

        params, loaded = load_state(path)
        assert params == daily_params_with_target
        assert loaded["final_amount"] == pytest.approx(summary.final_amount)
        assert loaded["currency"] == "USD"

    def test_record_is_flat(self, tmp_path, daily_params, daily_projection):
        path = tmp_path / "state.json"
        save_state(path, daily_params, summarize(daily_params, daily_projection))
        data = json.loads(path.read_text())
        assert not any(isinstance(v, dict) for v in data.values())
        assert {"principal", "period_days", "final_amount", "doubling_days"} <= set(data)

    def test_schema_mismatch_warns(self, tmp_path, daily_params, daily_projection):
        path = tmp_path / "state.json"
        save_state(path, daily_params, summarize(daily_params, daily_projection))
        data = json.loads(path.read_text())
        data["schema_version"] = "0.0.1"
        path.write_text(json.dumps(data))

        with pytest.warns(UserWarning, match="State schema version"):
            params, _ = load_state(path)
        assert params == daily_params

    def test_malformed_state(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text(json.dumps({"schema_version": SCHEMA_VERSION, "principal": "lots"}))
        with pytest.raises(ConfigurationError):
            load_state(path)

    def test_reset(self, tmp_path, daily_params, daily_projection):
        path = tmp_path / "state.json"
        save_state(path, daily_params, summarize(daily_params, daily_projection))
        assert reset_state(path) is True
        assert not path.exists()
        assert reset_state(path) is False


# ============================================================================
# CSV EXPORT
# ============================================================================

class TestExportCsv:

    def test_header_and_rows(self, tmp_path, contribution_params):
        path = export_csv(project(contribution_params), tmp_path / "out" / "projection.csv")
        lines = path.read_text().splitlines()
        assert lines[0] == "Period,Day,Amount"
        assert len(lines) == 5
        assert lines[1] == "0,0,1000.0"

    def test_readable_by_pandas(self, tmp_path, daily_projection):
        path = export_csv(daily_projection, tmp_path / "projection.csv")
        frame = pd.read_csv(path)
        assert list(frame.columns) == ["Period", "Day", "Amount"]
        assert frame["Amount"].iloc[-1] == pytest.approx(daily_projection.final_amount)
