"""
Unit tests for utils.py module.
"""

import pytest

from compoundcalc.exceptions import InvalidPeriodError, MissingInputError
from compoundcalc.utils import (
    annual_to_period,
    check_period_days,
    format_currency,
    period_count,
    period_to_annual,
    require_numbers,
    round2,
    round_half_up,
    to_number,
)


class TestToNumber:

    @pytest.mark.parametrize("value,expected", [
        (5, 5.0),
        (2.5, 2.5),
        ("1000", 1000.0),
        (" 7.5 ", 7.5),
        ("-3", -3.0),
    ])
    def test_usable(self, value, expected):
        assert to_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "  ", "abc", True, False,
                                       float("nan"), float("inf"), "nan", [1]])
    def test_unusable(self, value):
        assert to_number(value) is None


class TestRequireNumbers:

    def test_all_good(self):
        assert require_numbers({"a": "1", "b": 2}) == {"a": 1.0, "b": 2.0}

    def test_reports_all_missing(self):
        with pytest.raises(MissingInputError) as exc_info:
            require_numbers({"a": None, "b": 1, "c": "x"})
        assert exc_info.value.fields == ["a", "c"]
        assert "a, c" in str(exc_info.value)


class TestPeriods:

    @pytest.mark.parametrize("period", [1, 7, 30.0])
    def test_check_period_days_valid(self, period):
        assert check_period_days(period) == int(period)

    @pytest.mark.parametrize("period", [0, -1, 2.5])
    def test_check_period_days_invalid(self, period):
        with pytest.raises(InvalidPeriodError):
            check_period_days(period)

    @pytest.mark.parametrize("total,period,expected", [(30, 7, 4), (28, 7, 4), (6, 7, 0), (0, 1, 0)])
    def test_period_count(self, total, period, expected):
        assert period_count(total, period) == expected


class TestRates:

    def test_yearly_period_is_identity(self):
        assert annual_to_period(0.08, 365) == pytest.approx(0.08)

    def test_inverse(self):
        r = annual_to_period(0.12, 30)
        assert period_to_annual(r, 30) == pytest.approx(0.12)


class TestRounding:

    def test_round2(self):
        assert round2(1215.506) == 1215.51
        assert round2(1000) == 1000.0

    @pytest.mark.parametrize("value,expected", [(3284.5, 3285), (3754.28, 3754), (2.5, 3), (0.49, 0)])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestFormatCurrency:

    @pytest.mark.parametrize("currency,expected", [
        ("INR", "₹4,321.94"),
        ("USD", "$4,321.94"),
        ("EUR", "€4,321.94"),
    ])
    def test_known(self, currency, expected):
        assert format_currency(4321.94, currency) == expected

    def test_unknown(self):
        assert format_currency(1000, "GBP", decimals=0) == "GBP 1,000"
