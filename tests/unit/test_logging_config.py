"""
Unit tests for logging_config.py module.
"""

import json
import logging

import pytest

from compoundcalc.logging_config import JSONFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("compoundcalc")
    handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


class TestSetupLogging:

    def test_level(self):
        logger = setup_logging("DEBUG")
        assert logger.name == "compoundcalc"
        assert logger.level == logging.DEBUG

    def test_repeated_calls_keep_one_handler(self):
        setup_logging("INFO")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_json_format(self):
        logger = setup_logging("INFO", json_format=True)
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_module_loggers_are_children(self):
        assert logging.getLogger("compoundcalc.projection").parent is setup_logging()


class TestJSONFormatter:

    def test_fields(self):
        record = logging.LogRecord("compoundcalc.solver", logging.INFO, __file__, 1,
                                   "solved %d", (3,), None)
        entry = json.loads(JSONFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "compoundcalc.solver"
        assert entry["message"] == "solved 3"
        assert "timestamp" in entry
