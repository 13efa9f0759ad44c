"""Tests for generic string and number validation."""

import pytest

from fieldcheck.validators.scalars import validate_number, validate_string


class TestStringValidation:
    """Test non-empty string validation."""

    @pytest.mark.parametrize("value", ["ValidString", " x ", "0", "❤️"])
    def test_non_blank_strings_pass(self, value):
        """Test strings with visible content pass."""
        assert validate_string(value) is True

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_values_fail(self, value):
        """Test missing and whitespace-only values fail."""
        assert validate_string(value) is False


class TestNumberValidation:
    """Test numeric string validation."""

    @pytest.mark.parametrize(
        "number", ["123", "123.45", "-7", "+0.5", ".5", "5.", "1e10", "6.02E-23", " 42 ", "NaN", "-Infinity"]
    )
    def test_numbers_pass(self, number):
        """Test integers, decimals and exponents pass."""
        assert validate_number(number) is True

    @pytest.mark.parametrize(
        "number",
        [
            None,
            "",
            "   ",
            "123a",
            "abc",
            "12.3.4",
            "1_000",
            "1,000",
            "0x10",
            ".",
            "1e",
            "١٢٣",
            "１２３",
            "nan",
            "inf",
            "-INFINITY",
        ],
    )
    def test_non_numbers_fail(self, number):
        """Test values that do not parse as numbers fail."""
        assert validate_number(number) is False

    def test_rejection_is_logged(self, debug_logs):
        """Test a rejected number is logged at debug level."""
        validate_number("123a")
        assert "Number rejected" in debug_logs.text
