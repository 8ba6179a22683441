"""
Tests for record formatting and the numeric column formatter.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from conftest import TIMESTAMP_0, TIMESTAMP_1
from src.uvf_encoder.core.date_utils import DateUtils
from src.uvf_encoder.core.exceptions import NoApplicableCodeError
from src.uvf_encoder.processing import RecordFormatter, Sample, format_number


class TestFormatNumber:
    """Test cases for format_number."""

    @pytest.mark.parametrize("value, expected", [
        (52.0, "52.0"),
        (52, "52.0"),
        (52.1234567890, "52.1234567"),
        (-777.0, "-777.0"),
        (0.1, "0.1"),
        (-0.5, "-0.5"),
        (1e-8, "0.0000000"),
        (-52.1234567, "-52.123456"),
        (12345678.9, "12345678.9"),
        (Decimal("3.14159265358"), "3.1415926"),
    ])
    def test_format(self, value, expected):
        """Test truncation to seven fractional digits and the column width."""
        assert format_number(value) == expected

    def test_fraction_is_truncated_not_rounded(self):
        """Test that the eighth digit does not round up."""
        assert format_number(0.99999999) == "0.9999999"

    def test_custom_width(self):
        """Test narrower columns cut the fraction further."""
        assert format_number(51.9350382, width=6) == "51.935"

    def test_integer_part_too_wide(self):
        """Test values without room for a fractional digit are rejected."""
        with pytest.raises(NoApplicableCodeError, match="does not fit"):
            format_number(123456789.0)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite(self, value):
        """Test non finite values are rejected."""
        with pytest.raises(NoApplicableCodeError):
            format_number(value)


class TestRecordFormatter:
    """Test cases for RecordFormatter."""

    @pytest.fixture
    def formatter(self):
        """Create formatter instance."""
        return RecordFormatter()

    def test_value_record(self, formatter):
        """Test a plain value line."""
        assert formatter.format_record(Sample(TIMESTAMP_1, 52.0)) == "700101120052.0      "

    def test_no_data_record(self, formatter):
        """Test the sentinel for missing values."""
        assert formatter.format_record(Sample(TIMESTAMP_1, None)) == "7001011200-777      "

    def test_two_digit_year(self, formatter):
        """Test that only the year modulo 100 is written."""
        assert formatter.format_record(Sample(TIMESTAMP_0, 1.0)).startswith("6912311200")
        assert formatter.format_record(
            Sample(datetime(2069, 12, 31, 12, 0, tzinfo=timezone.utc), 1.0)
        ).startswith("6912311200")
        assert formatter.format_record(
            Sample(datetime(2005, 3, 4, 5, 6, tzinfo=timezone.utc), 1.0)
        ).startswith("0503040506")

    @pytest.mark.parametrize("value", [None, 0.0, -1.5, 52.1234567890, -9999.25, 42])
    def test_line_width_is_constant(self, formatter, value):
        """Test every line is 20 characters wide."""
        assert len(formatter.format_record(Sample(TIMESTAMP_1, value))) == 20

    def test_naive_timestamp_is_utc(self, formatter):
        """Test naive datetimes are taken as UTC."""
        assert formatter.format_record(Sample(datetime(1970, 1, 1, 12, 0), 1.0)).startswith("7001011200")

    def test_timezone(self):
        """Test rendering in another timezone."""
        formatter = RecordFormatter(DateUtils("Europe/Berlin"))

        assert formatter.format_record(Sample(TIMESTAMP_1, 1.0)).startswith("7001011300")
