"""Tests for tokenizing and lenient numeric parsing."""

import pytest

from dual_extrude.tokens import first_token, parse_float_prefix, parse_int_prefix, tokenize


class TestTokenize:
    """Test cases for tokenize and first_token."""

    def test_splits_on_whitespace(self):
        """Test that spaces, tabs and line endings separate tokens."""
        assert tokenize("G1  X10\tY20 E1.5\r\n") == ["G1", "X10", "Y20", "E1.5"]

    def test_blank_line(self):
        """Test that a blank line has no tokens."""
        assert tokenize("   \n") == []
        assert first_token([]) is None

    def test_first_token(self):
        """Test the command selector of a line."""
        assert first_token(tokenize("M104 S200 T0\n")) == "M104"


class TestParseIntPrefix:
    """Test cases for parse_int_prefix."""

    @pytest.mark.parametrize(
        "text,expected",
        [("210", 210), ("210.7", 210), ("-5", -5), ("+40", 40), ("0", 0)],
    )
    def test_valid_prefix(self, text, expected):
        """Test integer prefixes, ignoring trailing characters."""
        assert parse_int_prefix(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", ".5", "-"])
    def test_malformed_yields_zero(self, text):
        """Test that malformed values silently become 0."""
        assert parse_int_prefix(text) == 0


class TestParseFloatPrefix:
    """Test cases for parse_float_prefix."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5.0", 5.0),
            ("7.5", 7.5),
            ("-1.25", -1.25),
            (".75", 0.75),
            ("12.", 12.0),
            ("1e2", 100.0),
            ("3.5mm", 3.5),
        ],
    )
    def test_valid_prefix(self, text, expected):
        """Test decimal prefixes."""
        assert parse_float_prefix(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "x", "-", "."])
    def test_malformed_yields_zero(self, text):
        """Test that malformed values silently become 0.0."""
        assert parse_float_prefix(text) == 0.0
